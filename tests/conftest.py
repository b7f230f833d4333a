"""Shared test fixtures."""

import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def reset_excov_logger():
    """Drop handlers installed by CLI runs so they don't leak across tests."""
    yield
    logger = logging.getLogger("excov")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def make_tree(tmp_path: Path):
    """Build an examples root and a tests root under tmp_path.

    Usage: make_tree(examples=["a", "b"], tests={"a_test.cfg": "..."})
    """

    def _make(examples=(), tests=None):
        examples_root = tmp_path / "examples"
        tests_root = tmp_path / "tests"
        examples_root.mkdir(exist_ok=True)
        tests_root.mkdir(exist_ok=True)
        for name in examples:
            (examples_root / name).mkdir()
            (examples_root / name / "main.tf").write_text("# example\n")
        for name, content in (tests or {}).items():
            (tests_root / name).write_text(content)
        return examples_root, tests_root

    return _make


@pytest.fixture
def module_tree(make_tree):
    """An examples/tests pair where 'basic' is tested and 'advanced' is not."""
    return make_tree(
        examples=["basic", "advanced"],
        tests={
            "basic_test.cfg": 'run "basic" {\n  source = "./examples/basic"\n}\n',
            "notes.txt": '  source = "./examples/advanced"\n',
        },
    )


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    """Create a minimal valid config YAML file."""
    config = tmp_path / "excov.yaml"
    config.write_text(
        """\
check:
  examples_directory: "examples"
  tests_directory: "tests"
  filter: "_test.cfg"

scan:
  workers: 2
"""
    )
    return config


@pytest.fixture
def empty_config_yaml(tmp_path: Path) -> Path:
    """Create an empty config YAML file."""
    config = tmp_path / "excov.yaml"
    config.write_text("{}\n")
    return config
