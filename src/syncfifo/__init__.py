# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncfifo/__init__.py

"""syncfifo: an arbitrary-depth synchronous FIFO, modelled cycle by cycle.

The FIFO keeps one write index and one read index into a ring of N slots and
derives full/empty from those two registers alone, sacrificing one slot so
that equal pointers always mean "empty". Pointer advance wraps explicitly at
N, so the control logic is correct for any N >= 2, not only powers of two.

Main Components:

core:
    The FIFO itself: state snapshot, status flag generator, write/read
    pointer units, reset controller and the per-tick state machine.

ref:
    Reference collaborators: the read-first storage array, the two
    power-of-two pointer baselines and the address-width wrapper.

dv:
    Verification kit: transaction items, stimulus sequences, a logical
    reference model, scoreboard, coverage and an environment tying them
    together.

tools:
    The ``syncfifo-sim`` command-line simulator.

utils:
    Logging setup, colour helpers, plotting and small helpers.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version

try:
    __version__ = pkg_version("syncfifo")
except PackageNotFoundError:
    __version__ = "0+local"
