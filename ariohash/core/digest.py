# ariohash/core/digest.py
from typing import Sequence

from .codeunits import iter_leading_units
from .constants import MODULUS, TABLE_SIZE
from .table import MixingTable


def accumulate_seed(seed: int, proof_of_work: Sequence[int]) -> int:
    """
    Adds the proof-of-work string into the running seed.

    Wraps modulo 4294967295 after every single addition. Iterates by code
    point, so a surrogate pair contributes only its high half.
    """
    for unit in iter_leading_units(proof_of_work):
        seed = (seed + unit) % MODULUS
    return seed


def derive_output(
    table: MixingTable,
    proof_of_work: Sequence[int],
    output_length: int,
    alphabet: str,
    alphabet_units: Sequence[int],
    seed: int,
) -> str:
    """
    Builds one candidate string from the current mixing state.

    ``alphabet_units`` holds the code unit of each alphabet character in the
    same order as ``alphabet``. The steps below must run in this order: the
    second proof-of-work lookup uses the already updated ``code``.
    """
    alphabet_size = len(alphabet)
    pow_length = len(proof_of_work)
    tail = table[output_length % TABLE_SIZE]
    chars = []
    for i in range(output_length):
        code = i * alphabet_units[i % alphabet_size]
        code += proof_of_work[code % pow_length] * i
        code += table[i % TABLE_SIZE] * i
        code += tail
        code += proof_of_work[code % pow_length]
        code += seed
        chars.append(alphabet[code % alphabet_size])
    return "".join(chars)
