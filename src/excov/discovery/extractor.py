"""Reference extractor: find the examples a test file points at.

Test files are treated as plain lines of text. A line such as

    source = "./examples/basic"

references the example ``basic``. Only whole-line assignments match; a
commented-out line or one with trailing content is ignored.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from excov.errors import FileOpenError, FileScanError

logger = logging.getLogger(__name__)

SOURCE_LINE = re.compile(r'^\s*source\s*=\s*".*examples.*"$', re.ASCII)
QUOTED = re.compile(r'"(.*?)"')


def normalize_reference(value: str) -> str:
    """Reduce a quoted path to its final '/'-separated segment.

    Trailing slashes are ignored, so "./examples/basic/" gives "basic".
    """
    if not value:
        return "."
    stripped = value.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


def scan_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield a normalized reference for every quoted token on a source line.

    Every quoted token on a matching line is taken, not only the one
    assigned to ``source``.
    """
    for line in lines:
        line = line.removesuffix("\n").removesuffix("\r")
        if not SOURCE_LINE.match(line):
            continue
        for quoted in QUOTED.findall(line):
            reference = normalize_reference(quoted)
            logger.debug("Found reference %s", reference)
            yield reference


def extract_references(path: Path | str) -> list[str]:
    """Return the example references found in a single test file.

    Lines end at "\n" only; a lone "\r" inside a line is content.

    Raises FileOpenError if the file cannot be opened and FileScanError if
    reading fails part way through.
    """
    path = Path(path)
    logger.info("Scanning %s", path, extra={"path": path})
    try:
        handle = open(path, encoding="utf-8", errors="replace", newline="\n")
    except OSError as e:
        raise FileOpenError(path, e) from e

    with handle:
        try:
            return list(scan_lines(handle))
        except OSError as e:
            raise FileScanError(path, e) from e
