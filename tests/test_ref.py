# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: tests/test_ref.py

"""Read-first RAM, power-of-two baselines and the address-width wrapper."""

from __future__ import annotations

import random

import pytest

from syncfifo.core import FifoInputs, FifoViolation, SyncFifo
from syncfifo.ref import FifoWrapper, MaskedPtrFifo, ReadFirstRam, WrapBitPtrFifo


class NullSink:
    def report(self, event: FifoViolation) -> None:
        pass


def test_ram_read_first_on_collision() -> None:
    ram = ReadFirstRam(4, width=8)
    ram.write(2, 0x11)
    assert ram.clock(True, 2, 0x22, 2) == 0x11
    assert ram.read(2) == 0x22
    assert ram.clock(False, 0, 0, 2) == 0x22


def test_ram_truncates_and_checks_addresses() -> None:
    ram = ReadFirstRam(2, width=4)
    ram.write(0, 0xAB)
    assert ram.read(0) == 0xB
    assert ram.contents() == (0xB, 0)
    with pytest.raises(IndexError):
        ram.read(2)
    with pytest.raises(IndexError):
        ram.write(-1, 0)
    with pytest.raises(ValueError):
        ReadFirstRam(0)


@pytest.mark.parametrize(
    "cls, admitted", [(MaskedPtrFifo, 7), (WrapBitPtrFifo, 8)]
)
def test_baseline_depths(cls: type, admitted: int) -> None:
    fifo = cls(address_width=3, diagnostics=NullSink())
    acks = [fifo.tick(FifoInputs(wr_en=True, wr_data=i)).wr_ack for i in range(11)]
    assert sum(acks) == admitted == fifo.usable_depth
    assert fifo.full and not fifo.empty
    assert fifo.occupancy == admitted

    out = []
    for _ in range(admitted):
        o = fifo.tick(FifoInputs(rd_en=True))
        assert o.rd_valid
        out.append(o.rd_data)
    assert out == list(range(admitted))
    assert fifo.empty


def test_wrap_bit_pointers_use_the_extra_bit() -> None:
    fifo = WrapBitPtrFifo(address_width=2, diagnostics=NullSink())
    for i in range(4):
        fifo.tick(FifoInputs(wr_en=True, wr_data=i))
    assert fifo.wptr == 4 and fifo.rptr == 0
    assert fifo.addr(fifo.wptr) == fifo.addr(fifo.rptr)
    assert fifo.full


def test_baseline_output_follows_head_while_core_holds() -> None:
    base = MaskedPtrFifo(address_width=2)
    core = SyncFifo.from_capacity(4)
    for f in (base, core):
        f.tick(FifoInputs(wr_en=True, wr_data=0x5A))

    # the baseline re-samples the head slot, the core output register holds
    assert base.tick(FifoInputs()).rd_data == 0x5A
    assert core.tick(FifoInputs()).rd_data == 0


def test_baseline_reset() -> None:
    fifo = MaskedPtrFifo(address_width=2)
    fifo.tick(FifoInputs(wr_en=True, wr_data=1))
    o = fifo.tick(FifoInputs(reset=True, wr_en=True, wr_data=2, rd_en=True))
    assert o.empty and not o.wr_ack and not o.rd_valid
    assert fifo.wptr == fifo.rptr == 0


def test_baseline_rejects_zero_address_width() -> None:
    with pytest.raises(ValueError):
        MaskedPtrFifo(address_width=0)


@pytest.mark.parametrize("seed", [3, 11, 2024])
def test_masked_baseline_matches_core_at_power_of_two(seed: int) -> None:
    rng = random.Random(seed)
    base = MaskedPtrFifo(address_width=3, diagnostics=NullSink())
    core = SyncFifo.from_capacity(8, diagnostics=NullSink())

    for _ in range(800):
        inputs = FifoInputs(
            reset=rng.random() < 0.01,
            wr_en=rng.random() < 0.6,
            wr_data=rng.getrandbits(8),
            rd_en=rng.random() < 0.5,
        )
        b = base.tick(inputs)
        c = core.tick(inputs)
        assert (b.wr_ack, b.rd_valid) == (c.wr_ack, c.rd_valid)
        assert (b.full, b.empty, b.occupancy) == (c.full, c.empty, c.occupancy)
        assert b.violation == c.violation
        if c.rd_valid:
            assert b.rd_data == c.rd_data


def test_wrapper_capacity() -> None:
    fifo = FifoWrapper(address_width=4, element_width=32)
    assert fifo.capacity == 16
    assert fifo.address_width == 4
    assert fifo.config.name == "sync_fifo_aw4"
    for i in range(20):
        fifo.write(i)
    assert fifo.occupancy == 15
    assert fifo.read().rd_data == 0


def test_wrapper_rejects_zero_address_width() -> None:
    with pytest.raises(ValueError):
        FifoWrapper(address_width=0)
