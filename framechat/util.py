"""Console logging helpers and the name hash used to dispatch message types."""

import os

RESET = "\033[0m"
RED = "\033[0;31m"
GREEN = "\033[0;32m"
BLUE = "\033[0;34m"
YELLOW = "\033[0;33m"

DEBUG_ENV = "FRAMECHAT_DEBUG"

_HASH_SEED = 8603
_HASH_MULTIPLIER = 0xEDB8832F
_MASK = 0xFFFFFFFF


def name_hash(text):
    """Return the 32-bit hash of ``text`` (str or bytes); empty or None hashes to 8603.

    Input ends at the first NUL byte, and bytes above 0x7F count as signed chars.
    """
    if not text:
        return _HASH_SEED
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    data = data.split(b"\0", 1)[0]
    value = _HASH_SEED
    for byte in reversed(data):
        signed = byte - 0x100 if byte >= 0x80 else byte
        value = (signed + _HASH_MULTIPLIER * value) & _MASK
    return value


def log(message):
    """Print ``message`` as one line."""
    print(message, flush=True)


def log_error(message):
    """Print ``message`` in red as one line."""
    print(f"{RED}{message}{RESET}", flush=True)


def debug_log(message):
    """Print ``message`` only when the debug environment variable is set."""
    if os.environ.get(DEBUG_ENV):
        print(message, flush=True)