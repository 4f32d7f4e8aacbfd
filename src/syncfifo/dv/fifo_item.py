# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncfifo/dv/fifo_item.py

"""Per-tick transaction item for sync FIFO verification."""

from __future__ import annotations

import copy
import json
import logging
from typing import Iterable, Self

from syncfifo.core import FifoInputs, FifoOutputs

logger = logging.getLogger(__name__)


class FifoItem:
    """One tick worth of stimulus and response.

    Input fields (driven): reset, wr_en, wr_data, rd_en
    Output fields (observed or predicted): rd_data, full, empty, wr_ack, rd_valid

    An output field left as None on the expected item is a don't-care and is
    skipped by compare_out().
    """

    def __init__(self, name: str = "sync_fifo_item") -> None:
        self.name = name
        self.reset: bool = False
        self.wr_en: bool = False
        self.wr_data: int = 0
        self.rd_en: bool = False
        self.rd_data: int | None = None
        self.full: bool | None = None
        self.empty: bool | None = None
        self.wr_ack: bool | None = None
        self.rd_valid: bool | None = None

    def _in_fields(self) -> tuple[str, ...]:
        return ("reset", "wr_en", "wr_data", "rd_en")

    def _out_fields(self) -> tuple[str, ...]:
        return ("rd_data", "full", "empty", "wr_ack", "rd_valid")

    def _all_fields(self) -> tuple[str, ...]:
        return self._in_fields() + self._out_fields()

    def clone(self) -> Self:
        """Deep copy so the clone can diverge safely."""
        return copy.deepcopy(self)

    def to_inputs(self) -> FifoInputs:
        return FifoInputs(
            reset=self.reset, wr_en=self.wr_en, wr_data=self.wr_data, rd_en=self.rd_en
        )

    def set_outputs(self, outputs: FifoOutputs) -> None:
        """Copy observed outputs into the output fields."""
        for f in self._out_fields():
            setattr(self, f, getattr(outputs, f))

    def to_dict(self) -> dict[str, object]:
        """Structured view for logging/JSON (in+out)."""
        return {f: getattr(self, f) for f in self._all_fields()}

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)

    def inputs_str(self) -> str:
        return json.dumps(
            {f: getattr(self, f) for f in self._in_fields()}, sort_keys=True
        )

    def compare_in(self, other: Self, *, fields: Iterable[str] | None = None) -> bool:
        """Compare only input fields."""
        if type(self) is not type(other):
            return False
        flist = list(fields) if fields is not None else list(self._in_fields())
        return all(getattr(self, f) == getattr(other, f) for f in flist)

    def compare_out(self, other: Self, *, fields: Iterable[str] | None = None) -> bool:
        """Compare output fields of this (actual) item against ``other`` (expected).

        Expected fields set to None are not checked.
        """
        if type(self) is not type(other):
            return False
        flist = list(fields) if fields is not None else list(self._out_fields())
        ok = True
        for f in flist:
            exp = getattr(other, f)
            if exp is None:
                continue
            act = getattr(self, f)
            if act != exp:
                logger.error("MISMATCH %s: exp=%s act=%s", f, exp, act)
                ok = False
        return ok
