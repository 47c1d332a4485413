# ariohash/core/table.py
from typing import List, Sequence

from .constants import MODULUS, PAD_MODULUS, TABLE_CONSTANTS, TABLE_SIZE


def pad_input(units: Sequence[int], output_length: int) -> List[int]:
    """
    Extends the message to at least ``output_length`` code units.

    The unit appended at position ``n`` is ``TABLE_CONSTANTS[n % 128] % 0xFFFF``,
    taken from the pristine constants, never from a mixed table. Longer
    messages are returned unchanged.
    """
    padded = list(units)
    while len(padded) < output_length:
        padded.append(TABLE_CONSTANTS[len(padded) % TABLE_SIZE] % PAD_MODULUS)
    return padded


class MixingTable:
    """The 128-slot state carried between search iterations."""

    def __init__(self):
        # Fresh copy per instance; the constants are never mutated.
        self._values: List[int] = list(TABLE_CONSTANTS)

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> int:
        return self._values[index]

    def snapshot(self) -> List[int]:
        return list(self._values)

    def mix(self, padded: Sequence[int], seed: int) -> None:
        """Folds the padded message and the current seed into every slot, in place."""
        if not padded:
            raise ValueError("Cannot mix an empty message into the table")
        values = self._values
        length = len(padded)
        for i in range(TABLE_SIZE):
            values[i] = (values[i] + padded[i % length] + seed) % MODULUS
