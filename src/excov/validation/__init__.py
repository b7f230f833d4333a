"""Example coverage validation."""

from excov.validation.types import ValidationResult
from excov.validation.validator import (
    ExamplesValidator,
    compute_missing_tests,
    find_missing,
    validate_examples,
)

__all__ = [
    "ExamplesValidator",
    "ValidationResult",
    "compute_missing_tests",
    "find_missing",
    "validate_examples",
]
