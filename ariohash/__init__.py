# ariohash/__init__.py
from loguru import logger

__version__ = "0.3.0"

# Library code logs through loguru but stays silent until an application
# (e.g. the CLI) calls services.logging.setup_logging().
logger.disable("ariohash")

from .core.errors import (  # noqa: E402
    AriohashError, InvalidAlphabet, InvalidInput, InvalidOptions, InvalidOutputLength,
    SearchCancelled, SearchExhausted, SearchTimedOut,
)
from .core.models import HashOptions, HashResult  # noqa: E402
from .core.search import ProofOfWorkSearch, ario_hash, run_with_timeout  # noqa: E402

__all__ = [
    "__version__",
    "ario_hash", "run_with_timeout", "ProofOfWorkSearch", "HashOptions", "HashResult",
    "AriohashError", "InvalidOptions", "InvalidAlphabet", "InvalidOutputLength", "InvalidInput",
    "SearchExhausted", "SearchCancelled", "SearchTimedOut",
]
