# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncfifo/dv/fifo_sb.py

"""In-order scoreboard comparing model outputs against the reference model."""

from __future__ import annotations

import logging

from syncfifo.utils import green, red

from .fifo_item import FifoItem


class FifoScoreboard:
    """Compare expected and actual items one tick at a time.

    Statistics:
        vect_cnt: Total number of comparisons performed
        pass_cnt: Number of passing comparisons
        err_cnt: Number of failing comparisons

    Configuration:
        fail_on_error: Raise in final_check() if any error occurred
        error_quit_count: Raise as soon as this many errors have been seen
                          (0 disables the early stop)
    """

    def __init__(
        self,
        name: str = "sync_fifo_sb",
        *,
        fail_on_error: bool = True,
        error_quit_count: int = 1,
    ) -> None:
        if error_quit_count < 0:
            raise ValueError(f"{error_quit_count=}")
        self.name = name
        self.logger = logging.getLogger(f"{__name__}.{name}")
        self.fail_on_error = fail_on_error
        self.error_quit_count = error_quit_count
        self.vect_cnt: int = 0
        self.pass_cnt: int = 0
        self.err_cnt: int = 0

    def compare(
        self, exp: FifoItem, act: FifoItem, debug_state: dict | None = None
    ) -> bool:
        """Check one tick; returns True on match."""
        self.vect_cnt += 1
        if act.compare_out(exp):
            self.pass_cnt += 1
            self.logger.debug(
                "PASS exp=%s act=%s vect_cnt=%s",
                exp.to_dict(),
                act.to_dict(),
                self.vect_cnt,
            )
            return True

        self.err_cnt += 1
        self.logger.error("MISMATCH exp=%s act=%s", exp.to_dict(), act.to_dict())
        if debug_state is not None:
            self.logger.error("REF_MODEL_STATE: %s", debug_state)
        if (
            self.fail_on_error
            and self.error_quit_count
            and self.err_cnt >= self.error_quit_count
        ):
            raise AssertionError(
                f"Scoreboard error_quit_count exceeded "
                f"(errors={self.err_cnt}, threshold={self.error_quit_count})"
            )
        return False

    @property
    def passed(self) -> bool:
        return self.vect_cnt > 0 and self.err_cnt == 0

    def report(self) -> bool:
        """Log the PASS/FAIL banner; returns ``passed``."""
        if self.passed:
            self.logger.info(
                green("*** TEST PASSED - %d ran, %d passed ***"),
                self.vect_cnt,
                self.pass_cnt,
            )
        else:
            self.logger.error(
                red("*** TEST FAILED - %d ran, %d passed, %d failed ***"),
                self.vect_cnt,
                self.pass_cnt,
                self.err_cnt,
            )
        return self.passed

    def final_check(self) -> None:
        if self.fail_on_error and self.err_cnt > 0:
            raise AssertionError(
                f"Scoreboard saw {self.err_cnt} error(s); fail_on_error is enabled"
            )
