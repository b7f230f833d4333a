"""Example enumerator: one example per directory under the examples root."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from excov.errors import DirectoryReadError

logger = logging.getLogger(__name__)


def read_entries(root: Path | str) -> list[os.DirEntry]:
    """List the immediate entries of a directory, sorted by name.

    Raises DirectoryReadError if the directory is missing, is not a
    directory, or cannot be listed.
    """
    try:
        with os.scandir(root) as it:
            entries = list(it)
    except OSError as e:
        raise DirectoryReadError(root, e) from e
    return sorted(entries, key=lambda entry: entry.name)


def list_examples(examples_root: Path | str) -> list[str]:
    """Return the names of the example directories under examples_root.

    Only immediate subdirectories count; files and symlinks are ignored.
    """
    examples = [
        entry.name
        for entry in read_entries(examples_root)
        if entry.is_dir(follow_symlinks=False)
    ]
    logger.debug("Found %d examples in %s", len(examples), examples_root)
    return examples
