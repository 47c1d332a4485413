# ariohash/core/models.py
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from .constants import DEFAULT_CHARACTER_SET, DEFAULT_OUTPUT_LENGTH
from .errors import InvalidAlphabet
from .patterns import PatternLike

@dataclass
class HashOptions:
    """A single hash request. Every field has a default."""
    input: Optional[str] = ""
    salt: Optional[int] = 0
    output_length: int = DEFAULT_OUTPUT_LENGTH
    character_set: Optional[Union[str, Sequence[str]]] = None # None -> DEFAULT_CHARACTER_SET
    pattern: PatternLike = None # None matches every candidate
    proof_of_work_key: Optional[int] = 0
    max_iterations: Optional[int] = None # None -> search until a match

    @property
    def alphabet(self) -> str:
        if not self.character_set:
            return DEFAULT_CHARACTER_SET if self.character_set is None else ""
        if isinstance(self.character_set, str):
            return self.character_set
        try:
            items = list(self.character_set)
        except TypeError:
            raise InvalidAlphabet(f"Character set must be a string or a sequence of characters, got {self.character_set!r}") from None
        bad = [item for item in items if not isinstance(item, str) or len(item) != 1]
        if bad:
            raise InvalidAlphabet(f"Character set items must be single characters, got {bad!r}")
        return "".join(items)

@dataclass
class HashResult:
    """Outcome of a successful search."""
    hash: str
    proof_of_work_index: int # Key active at the start of the winning iteration
    iterations: int = 1 # Candidates generated, including the winner
