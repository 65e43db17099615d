"""Reading whitespace-separated numbers into a NumericBuffer."""
from __future__ import annotations

import logging
import os
import re
from typing import IO, Iterable, Iterator, Union

from basicstats.config import INITIAL_CAPACITY
from basicstats.services.buffer import NumericBuffer

__all__: list[str] = [
    "parse_values",
    "read_values",
]

logger = logging.getLogger(__name__)

# Longest leading float of a token, as scanf("%lf") would consume it:
# hex (0x1.8p3), decimal (-1.5e2, .5, 7.), inf/infinity and nan
NUMBER_PREFIX_RE = re.compile(
    r"[+-]?(?:"
    r"(?P<hex>0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?\d+)?)"
    r"|(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?"
    r"|inf(?:inity)?|nan"
    r")",
    re.IGNORECASE,
)

Source = Union[str, "os.PathLike[str]", IO[str]]


def _scan(tokens: Iterable[str]) -> Iterator[float]:
    """Yield numbers from ``tokens`` until one fails to parse.

    A token with a numeric prefix and trailing garbage (``3abc``) yields the
    prefix and then ends the scan.
    """
    for token in tokens:
        match = NUMBER_PREFIX_RE.match(token)
        if match is None:
            return
        text = match.group()
        yield float.fromhex(text) if match.group("hex") else float(text)
        if match.end() != len(token):
            return


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def parse_values(text: str) -> list[float]:
    """Parse the leading run of numeric tokens in ``text``."""
    return list(_scan(text.split()))


def read_values(source: Source, initial_capacity: int = INITIAL_CAPACITY) -> NumericBuffer:
    """Read numbers from a path or open text stream into a new buffer.

    Parsing stops silently at the first malformed token or at end of input.
    Raises OSError if ``source`` is a path that cannot be opened.
    """
    buffer = NumericBuffer(initial_capacity)
    if isinstance(source, (str, os.PathLike)):
        with open(source, "r", encoding="utf-8", errors="replace") as fh:
            buffer.extend(_scan(_tokens(fh)))
        name = os.fspath(source)
    else:
        buffer.extend(_scan(_tokens(source)))
        name = getattr(source, "name", "<stream>")
    logger.info("Read %d values from %s (capacity %d)", len(buffer), name, buffer.capacity)
    return buffer
