"""
Java-style .properties file parsing

Supports the subset used by Kafka client configs: ``key=value`` and
``key:value`` pairs, one per line, with ``#`` and ``!`` comment lines.
"""

from typing import Dict, Iterable

COMMENT_PREFIXES = ("#", "!")


def _split_line(line: str):
    """Split on the first '=' or, failing that, the first ':'"""
    for sep in ("=", ":"):
        idx = line.find(sep)
        if idx != -1:
            return line[:idx].strip(), line[idx + 1:].strip()
    return None


def parse_properties(lines: Iterable[str]) -> Dict[str, str]:
    """
    Parse properties from an iterable of lines

    Args:
        lines: Lines of a properties file (trailing newlines allowed)

    Returns:
        Dictionary of key/value pairs; later keys overwrite earlier ones
    """
    properties = {}

    for raw in lines:
        line = raw.strip()

        if not line or line.startswith(COMMENT_PREFIXES):
            continue

        pair = _split_line(line)
        if pair is None:
            continue

        key, value = pair
        if key:
            properties[key] = value

    return properties


def parse_properties_file(path: str) -> Dict[str, str]:
    """
    Read a properties file into a dictionary

    Bytes that are not valid UTF-8 are kept as surrogate escapes rather
    than rejected, so ISO-8859-1 files still parse.

    Args:
        path: Path to the properties file

    Returns:
        Dictionary of key/value pairs

    Raises:
        IOError if the file cannot be opened or read
    """
    try:
        with open(path, "r", encoding="utf-8", errors="surrogateescape") as f:
            return parse_properties(f)
    except OSError as e:
        raise IOError(f"failed to read properties file {path!r}: {e}") from e
