"""Report formatting for validation results."""

from __future__ import annotations

import json

from excov.validation.types import ValidationResult

FORMATS = ("text", "json")


def format_report(result: ValidationResult, fmt: str = "text") -> str:
    """Render a result as plain text or JSON."""
    if fmt == "json":
        return json.dumps(
            {
                "missing_tests": result.missing,
                "examples": result.examples,
                "test_files": [str(p) for p in result.test_files],
                "warnings": result.warnings,
            },
            indent=2,
        )
    if fmt != "text":
        raise ValueError(f"Unknown report format: {fmt}")

    lines = [result.summary()]
    if result.missing:
        lines.append("")
        lines.append(f"Examples missing tests ({len(result.missing)}):")
        lines.extend(f"  - {name}" for name in result.missing)
    else:
        lines.append("All examples have tests.")
    if result.warnings:
        lines.append("")
        lines.append("Skipped files:")
        lines.extend(f"  ! {w}" for w in result.warnings)
    return "\n".join(lines)
