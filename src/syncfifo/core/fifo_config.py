# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncfifo/core/fifo_config.py

"""Construction-time configuration of a synchronous FIFO."""

from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict, PositiveInt, field_validator


class FifoConfig(BaseModel):
    """Validated FIFO parameters.

    A capacity below 2 is refused: with one slot always kept empty, a
    single-slot FIFO could never hold data and would report full and empty
    at the same time.
    """

    model_config = ConfigDict(frozen=True)

    capacity: int
    element_width: PositiveInt = 8
    name: str = "sync_fifo"

    @field_validator("capacity")
    @classmethod
    def _check_capacity(cls, v: int) -> int:
        if v < 2:
            raise ValueError(
                f"capacity must be >= 2 (one slot is kept empty), got {v}"
            )
        return v

    @classmethod
    def from_address_width(
        cls, address_width: int, element_width: int = 8, name: str = "sync_fifo"
    ) -> "FifoConfig":
        """Map an address-width parameter to ``capacity = 2 ** address_width``."""
        if address_width < 1:
            raise ValueError(f"{address_width=}")
        return cls(
            capacity=1 << address_width, element_width=element_width, name=name
        )

    @property
    def data_mask(self) -> int:
        """Bit mask for one element."""
        return (1 << self.element_width) - 1

    @property
    def usable_depth(self) -> int:
        """Maximum number of elements held at once."""
        return self.capacity - 1

    def __str__(self) -> str:
        return f"{self.__class__.__name__}:\n" + json.dumps(self.model_dump(), indent=2)
