# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncfifo/core/fifo_diag.py

"""Usage-violation reporting.

A write requested while full, or a read requested while empty, is not an
error: the request is simply not admitted. Callers that ignore the flags
are still worth hearing about, so the tick machine reports each refused
request to a diagnostic sink. Sinks are informational only and never feed
back into FIFO state.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Protocol

from syncfifo.utils import yellow


class ViolationKind(str, Enum):
    """The two ways a caller can violate the FIFO protocol."""

    WRITE_WHILE_FULL = "write_while_full"
    READ_WHILE_EMPTY = "read_while_empty"


@dataclass(frozen=True)
class FifoViolation:
    """One refused request, stamped with the tick it happened on."""

    kind: ViolationKind
    tick: int
    wptr: int
    rptr: int

    def to_dict(self) -> dict[str, object]:
        d = asdict(self)
        d["kind"] = self.kind.value
        return d


class DiagnosticSink(Protocol):  # pylint: disable=too-few-public-methods
    """Anything that accepts violation events."""

    def report(self, event: FifoViolation) -> None:
        """Receive one violation event."""


class FifoDiagnostics:
    """Counting, logging diagnostic sink with a bounded event history."""

    def __init__(self, name: str = "sync_fifo", history: int = 64) -> None:
        self.name = name
        self.logger = logging.getLogger(f"{__name__}.{name}")
        self.counts: dict[ViolationKind, int] = {k: 0 for k in ViolationKind}
        self.history: deque[FifoViolation] = deque(maxlen=history)

    def report(self, event: FifoViolation) -> None:
        self.counts[event.kind] += 1
        self.history.append(event)
        self.logger.warning(
            yellow("%s: %s at tick %d (wptr=%d rptr=%d), request ignored"),
            self.name,
            event.kind.value.replace("_", " "),
            event.tick,
            event.wptr,
            event.rptr,
        )

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def violation(self) -> bool:
        """True once any violation has been reported since the last clear()."""
        return self.total > 0

    def clear(self) -> None:
        for k in self.counts:
            self.counts[k] = 0
        self.history.clear()

    def summary(self) -> dict[str, int]:
        return {k.value: n for k, n in self.counts.items()}


def report_refused(  # pylint: disable=too-many-arguments
    sink: DiagnosticSink | None,
    tick: int,
    *,
    wr_refused: bool,
    rd_refused: bool,
    wptr: int,
    rptr: int,
) -> bool:
    """Send events for refused requests to ``sink``; return the violation flag."""
    if sink is not None:
        if wr_refused:
            sink.report(FifoViolation(ViolationKind.WRITE_WHILE_FULL, tick, wptr, rptr))
        if rd_refused:
            sink.report(FifoViolation(ViolationKind.READ_WHILE_EMPTY, tick, wptr, rptr))
    return wr_refused or rd_refused
