"""Log file reading with an explicit, validated text encoding."""

import codecs
from pathlib import Path

from medoc_check.exceptions import ConfigurationError


def validate_encoding(encoding: str | None) -> str:
    """Return the canonical codec name for an encoding identifier.

    Args:
        encoding: Encoding identifier such as "cp1251" or "windows-1251"

    Returns:
        Canonical codec name (e.g. "cp1251")

    Raises:
        ConfigurationError: If the identifier is empty or unknown

    """
    if not encoding or not encoding.strip():
        msg = "Log encoding must not be empty"
        raise ConfigurationError(msg, target="encoding")
    try:
        return codecs.lookup(encoding.strip()).name
    except LookupError as e:
        msg = f"Unknown text encoding: {encoding!r}"
        raise ConfigurationError(msg, target="encoding") from e


def read_log_text(path: Path, encoding: str) -> str:
    """Read a whole log file, decoding strictly.

    Raises:
        FileNotFoundError: If the file does not exist
        OSError: If the file cannot be read
        UnicodeDecodeError: If the content is not valid in the encoding

    """
    return path.read_text(encoding=encoding, errors="strict")
