"""Xorshift64 byte generator used to pick board shuffles."""

from __future__ import annotations

import struct

MASK_64 = 0xFFFF_FFFF_FFFF_FFFF
WARMUP_ROUNDS = 10


class XorShiftPRNG:
    """Deterministic generator whose whole state is one 64-bit word."""

    __slots__ = ("state",)

    def __init__(self, seed: int) -> None:
        self.state = seed & MASK_64
        # Low-entropy seeds (e.g. clock readings) need a few rounds to spread.
        for _ in range(WARMUP_ROUNDS):
            self.advance()

    @classmethod
    def from_clock(cls, seconds: float) -> XorShiftPRNG:
        """Seed from the IEEE-754 bit pattern of a clock reading."""
        (seed,) = struct.unpack("<Q", struct.pack("<d", seconds))
        return cls(seed)

    def advance(self) -> None:
        x = self.state
        x ^= (x << 13) & MASK_64
        x ^= x >> 7
        x ^= (x << 17) & MASK_64
        self.state = x

    def next_byte(self) -> int:
        """Return bits 32..39 of the state, then advance."""
        byte = (self.state >> 32) & 0xFF
        self.advance()
        return byte

    def next_byte_below(self, limit: int) -> int:
        """Return a uniform value in ``0..limit-1`` for ``1 <= limit <= 255``.

        Bytes above the largest multiple of *limit* are rejected so the
        result carries no modulo bias.
        """
        if not 1 <= limit <= 255:
            raise ValueError(f"limit must be in 1..255, got {limit}")
        modulo_limit = (255 - 255 % limit) - 1
        while True:
            byte = self.next_byte()
            if byte <= modulo_limit:
                return byte % limit
