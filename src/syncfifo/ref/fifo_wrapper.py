# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncfifo/ref/fifo_wrapper.py

"""Address-width parameterised wrapper.

Synthesis flows usually size memories by address width. The wrapper only
translates that parameter into a capacity and forwards to SyncFifo.
"""

from __future__ import annotations

from syncfifo.core import DiagnosticSink, FifoConfig, SyncFifo


class FifoWrapper(SyncFifo):
    """SyncFifo with ``capacity = 2 ** address_width``."""

    def __init__(
        self,
        address_width: int = 3,
        element_width: int = 8,
        diagnostics: DiagnosticSink | None = None,
    ) -> None:
        super().__init__(
            FifoConfig.from_address_width(
                address_width, element_width, name=f"sync_fifo_aw{address_width}"
            ),
            diagnostics,
        )
        self.address_width = address_width
