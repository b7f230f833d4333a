"""Discovery of examples, candidate test files and the references inside them."""

from excov.discovery.examples import list_examples
from excov.discovery.extractor import extract_references, normalize_reference, scan_lines
from excov.discovery.selector import select_test_files

__all__ = [
    "list_examples",
    "select_test_files",
    "extract_references",
    "normalize_reference",
    "scan_lines",
]
