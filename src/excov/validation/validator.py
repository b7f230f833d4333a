"""Cross-reference examples against the tests that exercise them."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import TYPE_CHECKING

from excov.discovery.examples import list_examples
from excov.discovery.extractor import SOURCE_LINE, extract_references
from excov.discovery.selector import select_test_files
from excov.errors import FileOpenError, FileScanError
from excov.validation.types import ValidationResult

if TYPE_CHECKING:
    from excov.config.schema import ExcovConfig

logger = logging.getLogger(__name__)


def find_missing(examples: Iterable[str], references: set[str]) -> list[str]:
    """Return the examples with no reference, keeping their order."""
    return [e for e in examples if e not in references]


class ExamplesValidator:
    """Checks that every example directory is referenced by some test file.

    By default any directory or file error aborts the whole check. With
    fail_fast=False, a test file that cannot be opened or read is skipped
    and recorded as a warning instead. Directory errors are always fatal.

    With workers > 1 the candidate files are scanned on a thread pool. Each
    file's references are merged by the calling thread in selection order,
    so the result is the same as a sequential scan.
    """

    def __init__(self, workers: int = 1, fail_fast: bool = True) -> None:
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.workers = workers
        self.fail_fast = fail_fast

    def validate(
        self,
        examples_root: Path | str,
        tests_root: Path | str,
        name_filter: str,
    ) -> ValidationResult:
        """Run the check and return the full result."""
        examples = list_examples(examples_root)
        test_files = select_test_files(tests_root, name_filter)

        logger.info("Source filter: '%s'", SOURCE_LINE.pattern)
        references, warnings = self._collect_references(test_files)

        missing = find_missing(examples, references)
        result = ValidationResult(
            missing=missing,
            examples=examples,
            test_files=test_files,
            references=references,
            warnings=warnings,
        )
        logger.info("Check complete: %s", result.summary())
        return result

    def _collect_references(self, test_files: list[Path]) -> tuple[set[str], list[str]]:
        references: set[str] = set()
        warnings: list[str] = []

        if self.workers > 1 and len(test_files) > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                futures = [executor.submit(extract_references, p) for p in test_files]
                try:
                    for path, future in zip(test_files, futures):
                        self._merge(path, future.result, references, warnings)
                except BaseException:
                    for future in futures:
                        future.cancel()
                    raise
        else:
            for path in test_files:
                self._merge(path, lambda p=path: extract_references(p), references, warnings)

        return references, warnings

    def _merge(
        self,
        path: Path,
        scan: Callable[[], list[str]],
        references: set[str],
        warnings: list[str],
    ) -> None:
        try:
            batch = scan()
        except (FileOpenError, FileScanError) as e:
            if self.fail_fast:
                raise
            logger.warning("Skipping %s: %s", path, e)
            warnings.append(str(e))
            return
        references.update(batch)


def compute_missing_tests(
    examples_root: Path | str,
    tests_root: Path | str,
    name_filter: str,
) -> list[str]:
    """Return the examples under examples_root that no selected test references."""
    return ExamplesValidator().validate(examples_root, tests_root, name_filter).missing


def validate_examples(
    config: ExcovConfig,
    examples_root: Path | str | None = None,
    tests_root: Path | str | None = None,
    name_filter: str | None = None,
) -> ValidationResult:
    """Run a check using config values for anything not passed explicitly."""
    validator = ExamplesValidator(
        workers=config.scan.workers,
        fail_fast=config.scan.fail_fast,
    )
    return validator.validate(
        examples_root if examples_root is not None else config.check.examples_directory,
        tests_root if tests_root is not None else config.check.tests_directory,
        name_filter if name_filter is not None else config.check.filter,
    )
