"""Packs piece positions into compact byte strings for deduplication.

Each piece contributes one atom: its index in ``pBits`` bits, its row in
``hBits`` bits and its column in ``wBits`` bits.  Bits are written least
significant first, and bit ``k`` of the key lives in byte ``k // 8`` at
position ``k % 8``.
"""

from __future__ import annotations

from gatesolver.backend.engine.gamestate.state import GateState


def calc_bits(n: int) -> int:
    """Bits needed to tell ``n`` values apart, i.e. ``ceil(log2(n))``."""
    return max(n - 1, 0).bit_length()


def bit_widths(state: GateState) -> tuple[int, int, int]:
    """Return ``(pBits, hBits, wBits)`` for *state*'s geometry."""
    p_bits = max(calc_bits(state.num_pieces), 1)
    h_bits = calc_bits(state.lines)
    w_bits = calc_bits(state.num_chars_map // state.lines)
    return p_bits, h_bits, w_bits


def packed_size(state: GateState) -> int:
    """Size in bits of an encoded *state*."""
    return sum(bit_widths(state)) * state.num_pieces


def get_bit(key: bytes, idx: int) -> int:
    return (key[idx >> 3] >> (idx & 7)) & 1


class StateEncoder:
    """Encodes states of one puzzle, reusing a single scratch buffer."""

    def __init__(self, state: GateState) -> None:
        self.p_bits, self.h_bits, self.w_bits = bit_widths(state)
        self.num_pieces = state.num_pieces
        self.bits = packed_size(state)
        self._buffer = bytearray((self.bits + 7) // 8)

    def _put(self, value: int, width: int, idx: int) -> int:
        buf = self._buffer
        for j in range(width):
            byte, bit = divmod(idx, 8)
            if (value >> j) & 1:
                buf[byte] |= 1 << bit
            else:
                buf[byte] &= ~(1 << bit) & 0xFF
            idx += 1
        return idx

    def encode(self, state: GateState) -> bytes:
        idx = 0
        for i in range(self.num_pieces):
            idx = self._put(i, self.p_bits, idx)
            idx = self._put(state.piece_y[i], self.h_bits, idx)
            idx = self._put(state.piece_x[i], self.w_bits, idx)
        return bytes(self._buffer)


def encode(state: GateState) -> bytes:
    """One-off encoding of *state*; prefer ``StateEncoder`` inside loops."""
    return StateEncoder(state).encode(state)
