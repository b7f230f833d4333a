"""Tests for the provider and its examples validation data source."""

from pathlib import Path
from unittest.mock import MagicMock

from excov.errors import FileOpenError
from excov.provider import (
    DATA_SOURCE_ID,
    CoverageProvider,
    ExamplesValidationDataSource,
    Severity,
)
from excov.validation.types import ValidationResult
from excov.validation.validator import ExamplesValidator


class TestCoverageProvider:
    def test_metadata(self):
        provider = CoverageProvider(version="test")
        assert provider.metadata() == {"type_name": "coverage", "version": "test"}

    def test_provider_schema_has_no_attributes(self):
        assert CoverageProvider().schema() == {"attributes": {}}

    def test_no_resources(self):
        assert CoverageProvider().resources() == []

    def test_data_sources(self):
        factories = CoverageProvider().data_sources()
        assert len(factories) == 1
        assert isinstance(factories[0](), ExamplesValidationDataSource)


class TestExamplesValidationDataSource:
    def test_type_name(self):
        ds = ExamplesValidationDataSource()
        assert ds.type_name("coverage") == "coverage_examples_validation"

    def test_schema_attributes(self):
        attrs = ExamplesValidationDataSource().schema()["attributes"]
        assert set(attrs) == {
            "id", "examples_directory", "tests_directory", "filter", "missing_tests",
        }
        assert attrs["id"]["computed"] is True
        assert attrs["missing_tests"]["element_type"] == "string"
        for name in ("examples_directory", "tests_directory", "filter"):
            assert attrs[name]["required"] is True

    def test_read(self, module_tree):
        examples_root, tests_root = module_tree
        response = ExamplesValidationDataSource().read({
            "examples_directory": str(examples_root),
            "tests_directory": str(tests_root),
            "filter": "_test.cfg",
        })
        assert not response.has_error
        assert response.state == {
            "id": DATA_SOURCE_ID,
            "examples_directory": str(examples_root),
            "tests_directory": str(tests_root),
            "filter": "_test.cfg",
            "missing_tests": ["advanced"],
        }

    def test_read_nothing_missing_gives_empty_list(self, make_tree):
        examples_root, tests_root = make_tree(
            examples=["a"], tests={"a_test.cfg": 'source = "./examples/a"\n'},
        )
        response = ExamplesValidationDataSource().read({
            "examples_directory": str(examples_root),
            "tests_directory": str(tests_root),
            "filter": "_test",
        })
        assert response.state["missing_tests"] == []

    def test_read_missing_attribute(self):
        response = ExamplesValidationDataSource().read({"examples_directory": "x"})
        assert response.has_error
        assert response.state is None
        assert response.diagnostics[0].summary == "Invalid data source configuration"

    def test_read_directory_error(self, tmp_path: Path):
        response = ExamplesValidationDataSource().read({
            "examples_directory": str(tmp_path / "nope"),
            "tests_directory": str(tmp_path),
            "filter": "_test",
        })
        assert response.has_error
        assert response.state is None
        assert "nope" in response.diagnostics[0].detail

    def test_read_reports_skipped_files_as_warnings(self):
        validator = MagicMock(spec=ExamplesValidator)
        validator.validate.return_value = ValidationResult(
            missing=["b"], examples=["a", "b"], warnings=["Failed to open test file x"],
        )
        response = ExamplesValidationDataSource(validator).read({
            "examples_directory": "examples",
            "tests_directory": "tests",
            "filter": "_test",
        })
        assert not response.has_error
        assert response.state["missing_tests"] == ["b"]
        assert response.diagnostics[0].severity == Severity.WARNING

    def test_read_file_error(self):
        validator = MagicMock(spec=ExamplesValidator)
        validator.validate.side_effect = FileOpenError("tests/a_test.cfg", PermissionError("denied"))
        response = ExamplesValidationDataSource(validator).read({
            "examples_directory": "examples",
            "tests_directory": "tests",
            "filter": "_test",
        })
        assert response.has_error
        assert response.diagnostics[0].summary == "Unable to validate examples"
