"""Test file selector: pick the files under the tests root worth scanning."""

from __future__ import annotations

import logging
from pathlib import Path

from excov.discovery.examples import read_entries

logger = logging.getLogger(__name__)


def select_test_files(tests_root: Path | str, name_filter: str) -> list[Path]:
    """Return files directly under tests_root whose name contains name_filter.

    The match is a case-sensitive substring test on the file name. Nested
    directories are never descended into, even if their name matches.
    """
    root = Path(tests_root)
    selected = [
        root / entry.name
        for entry in read_entries(root)
        if not entry.is_dir(follow_symlinks=False) and name_filter in entry.name
    ]
    logger.debug(
        "Selected %d test files in %s matching '%s'", len(selected), root, name_filter,
    )
    return selected
