# ariohash/core/search.py
import concurrent.futures
import dataclasses
import threading
from typing import Callable, List, Optional

from loguru import logger

from .codeunits import to_base36, to_code_units
from .constants import DEFAULT_PROGRESS_INTERVAL, UINT32_MAX
from .digest import accumulate_seed, derive_output
from .errors import (
    InvalidAlphabet, InvalidInput, InvalidOptions, InvalidOutputLength,
    SearchCancelled, SearchExhausted, SearchTimedOut,
)
from .models import HashOptions, HashResult
from .normalizer import Clock, normalize_input
from .patterns import compile_pattern, describe_pattern
from .table import MixingTable, pad_input


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ProofOfWorkSearch:
    """
    Runs the keyed digest and searches proof-of-work keys until the pattern matches.

    Options are validated on construction, so a bad request fails before any
    work is done. Each instance owns its mixing table, seed and proof-of-work
    string; nothing is shared between instances, so independent searches can
    run on separate threads. ``cancel()`` may be called from another thread and
    is honoured before the next candidate is generated.
    """

    def __init__(self,
                 options: Optional[HashOptions] = None,
                 clock: Optional[Clock] = None,
                 progress_callback: Optional[Callable[[int, int], None]] = None,
                 progress_interval: int = DEFAULT_PROGRESS_INTERVAL):
        self.options = options or HashOptions()
        self.clock = clock
        self.progress_callback = progress_callback
        self.progress_interval = max(1, progress_interval)
        self.iterations = 0
        self._is_cancelled = threading.Event()

        self.salt, self.start_key = self._validate_numbers(self.options)
        self.output_length = self._validate_output_length(self.options.output_length)
        self.alphabet, self.alphabet_units = self._validate_alphabet(self.options.alphabet)
        if self.options.input is not None and not isinstance(self.options.input, str):
            raise InvalidInput(f"Input must be a string, got {type(self.options.input).__name__}")
        self.predicate = compile_pattern(self.options.pattern)
        logger.debug(
            f"Search configured: length={self.output_length}, alphabet={len(self.alphabet)} chars, "
            f"salt={self.salt}, key={self.start_key}, pattern={describe_pattern(self.options.pattern)}"
        )

    # --- Validation ---

    @staticmethod
    def _validate_output_length(length) -> int:
        if not _is_int(length) or length < 1:
            logger.error(f"Rejected output length: {length!r}")
            raise InvalidOutputLength(f"Output length must be a positive integer, got {length!r}")
        return length

    @staticmethod
    def _validate_alphabet(alphabet: str):
        if not alphabet:
            logger.error("Rejected empty character set.")
            raise InvalidAlphabet("Character set must not be empty")
        wide = [ch for ch in alphabet if ord(ch) > 0xFFFF]
        if wide:
            logger.error(f"Rejected character set with characters outside the BMP: {wide!r}")
            raise InvalidAlphabet(
                f"Character set may only contain Basic Multilingual Plane characters, got {wide!r}"
            )
        if len(set(alphabet)) != len(alphabet):
            logger.warning("Character set contains duplicates; repeated characters are weighted higher.")
        return alphabet, [ord(ch) for ch in alphabet]

    @staticmethod
    def _validate_numbers(options: HashOptions):
        salt = 0 if options.salt is None else options.salt
        key = 0 if options.proof_of_work_key is None else options.proof_of_work_key
        for name, value in (("salt", salt), ("proof_of_work_key", key)):
            if not _is_int(value) or not 0 <= value <= UINT32_MAX:
                logger.error(f"Rejected {name}: {value!r}")
                raise InvalidOptions(f"{name} must be an unsigned 32-bit integer, got {value!r}")
        limit = options.max_iterations
        if limit is not None and (not _is_int(limit) or limit < 1):
            logger.error(f"Rejected max_iterations: {limit!r}")
            raise InvalidOptions(f"max_iterations must be a positive integer or None, got {limit!r}")
        return salt, key

    # --- Search ---

    def _emit_progress(self, key: int):
        if self.progress_callback:
            try: self.progress_callback(self.iterations, key)
            except Exception as e: logger.error(f"Error in progress callback: {e}")

    def run(self) -> HashResult:
        """Searches until a candidate matches; raises on cap or cancellation."""
        message = normalize_input(self.options.input, self.clock)
        units = to_code_units(message)
        padded = pad_input(units, self.output_length)

        table = MixingTable()
        seed = self.salt
        proof_of_work: List[int] = units
        key = self.start_key
        limit = self.options.max_iterations
        self.iterations = 0
        logger.info(f"Starting proof-of-work search at key {key} (message length {len(units)}).")

        while True:
            if self._is_cancelled.is_set():
                logger.info(f"Search cancelled after {self.iterations} iterations.")
                raise SearchCancelled(self.iterations)
            if limit is not None and self.iterations >= limit:
                logger.warning(f"Search exhausted after {self.iterations} iterations without a match.")
                raise SearchExhausted(self.iterations, key)

            current_key = key
            seed = accumulate_seed(seed, proof_of_work)
            table.mix(padded, seed)
            candidate = derive_output(
                table, proof_of_work, self.output_length, self.alphabet, self.alphabet_units, seed
            )
            self.iterations += 1

            if self.predicate(candidate):
                logger.info(f"Match found at key {current_key} after {self.iterations} iterations.")
                return HashResult(hash=candidate, proof_of_work_index=current_key, iterations=self.iterations)

            proof_of_work = padded + to_code_units(to_base36(key))
            key += 1
            if self.iterations % self.progress_interval == 0:
                logger.debug(f"Searched {self.iterations} keys, next key {key}.")
                self._emit_progress(key)

    def cancel(self):
        """Signals the search to stop before its next iteration."""
        logger.info("Cancellation requested for proof-of-work search.")
        self._is_cancelled.set()


def run_with_timeout(search: ProofOfWorkSearch, timeout: Optional[float]) -> HashResult:
    """
    Runs ``search`` on a worker thread, cancelling it once ``timeout`` seconds pass.

    A ``None`` timeout runs the search inline.
    """
    if timeout is None:
        return search.run()
    executor = concurrent.futures.ThreadPoolExecutor(max_workers=1, thread_name_prefix="ariohash")
    future = executor.submit(search.run)
    try:
        try:
            return future.result(timeout=timeout)
        except concurrent.futures.TimeoutError:
            search.cancel()
            try:
                # The worker may have matched between the timeout and cancel().
                return future.result()
            except SearchCancelled:
                raise SearchTimedOut(search.iterations, timeout) from None
    finally:
        # Ctrl-C during the wait must not leave shutdown() joining a live worker.
        if not future.done():
            logger.debug("Wait for search interrupted; cancelling worker.")
            search.cancel()
        executor.shutdown(wait=True)


def ario_hash(options: Optional[HashOptions] = None, clock: Optional[Clock] = None, **overrides) -> HashResult:
    """
    Computes a hash and its proof-of-work index.

    Keyword overrides use HashOptions field names, e.g.
    ``ario_hash(input="abc", salt=1, output_length=16)``.
    """
    options = options or HashOptions()
    if overrides:
        try:
            options = dataclasses.replace(options, **overrides)
        except TypeError as e:
            raise InvalidOptions(str(e)) from e
    return ProofOfWorkSearch(options, clock=clock).run()
