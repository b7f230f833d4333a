"""Provider surface exposing the examples check as a data source.

A host (for example an infrastructure-as-code plugin server) asks the
provider for its data sources, reads their schema, and calls ``read`` with
the user's configuration. ``read`` never raises: failures are returned as
diagnostics alongside an empty state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ValidationError

from excov.errors import ExcovError
from excov.validation.validator import ExamplesValidator

logger = logging.getLogger(__name__)

PROVIDER_TYPE_NAME = "coverage"
DATA_SOURCE_ID = "examples-validation"


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class Diagnostic:
    severity: Severity
    summary: str
    detail: str = ""


@dataclass
class ReadResponse:
    state: dict[str, Any] | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def has_error(self) -> bool:
        return any(d.severity == Severity.ERROR for d in self.diagnostics)


class ExamplesValidationModel(BaseModel):
    """Data model of the examples validation data source."""

    id: str | None = None
    examples_directory: str
    tests_directory: str
    filter: str
    missing_tests: list[str] | None = None


class ExamplesValidationDataSource:
    """Validate that there are tests for all examples in the example directory."""

    def __init__(self, validator: ExamplesValidator | None = None) -> None:
        self.validator = validator or ExamplesValidator()

    def type_name(self, provider_type_name: str) -> str:
        return f"{provider_type_name}_examples_validation"

    def schema(self) -> dict[str, Any]:
        return {
            "markdown_description": (
                "Validate that there are tests for all examples in the example directory."
            ),
            "attributes": {
                "id": {
                    "type": "string",
                    "markdown_description": "ID",
                    "computed": True,
                },
                "examples_directory": {
                    "type": "string",
                    "markdown_description": "Filepath to the examples directory for the module.",
                    "required": True,
                },
                "tests_directory": {
                    "type": "string",
                    "markdown_description": "Filepath to the tests directory for the module.",
                    "required": True,
                },
                "filter": {
                    "type": "string",
                    "markdown_description": (
                        "Filter to use to find tests responsible for validating the examples."
                    ),
                    "required": True,
                },
                "missing_tests": {
                    "type": "list",
                    "element_type": "string",
                    "markdown_description": "List of example directories that are missing tests",
                    "computed": True,
                },
            },
        }

    def read(self, config: dict[str, Any]) -> ReadResponse:
        """Run the check for a host request and return the new state."""
        response = ReadResponse()
        try:
            data = ExamplesValidationModel(**config)
        except ValidationError as e:
            response.diagnostics.append(
                Diagnostic(Severity.ERROR, "Invalid data source configuration", str(e))
            )
            return response

        data.id = DATA_SOURCE_ID
        try:
            result = self.validator.validate(
                data.examples_directory, data.tests_directory, data.filter,
            )
        except ExcovError as e:
            response.diagnostics.append(
                Diagnostic(Severity.ERROR, "Unable to validate examples", str(e))
            )
            return response

        data.missing_tests = list(result.missing)
        for warning in result.warnings:
            response.diagnostics.append(
                Diagnostic(Severity.WARNING, "Test file skipped", warning)
            )

        logger.debug("read a data source")
        response.state = data.model_dump()
        return response


class CoverageProvider:
    """Provider exposing the example coverage data sources.

    version is "dev" for local builds and "test" under acceptance tests.
    """

    def __init__(self, version: str = "dev") -> None:
        self.version = version

    def metadata(self) -> dict[str, str]:
        return {"type_name": PROVIDER_TYPE_NAME, "version": self.version}

    def schema(self) -> dict[str, Any]:
        return {"attributes": {}}

    def resources(self) -> list[Callable[[], Any]]:
        return []

    def data_sources(self) -> list[Callable[[], ExamplesValidationDataSource]]:
        return [ExamplesValidationDataSource]
