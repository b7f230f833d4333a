"""Validation result types."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ValidationResult:
    """Outcome of one coverage check."""

    missing: list[str] = field(default_factory=list)
    examples: list[str] = field(default_factory=list)
    test_files: list[Path] = field(default_factory=list)
    references: set[str] = field(default_factory=set)
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.missing

    @property
    def covered(self) -> list[str]:
        return [e for e in self.examples if e in self.references]

    def summary(self) -> str:
        text = (
            f"{len(self.covered)}/{len(self.examples)} examples covered by "
            f"{len(self.test_files)} test files, {len(self.missing)} missing"
        )
        if self.warnings:
            text += f" ({len(self.warnings)} files skipped)"
        return text
