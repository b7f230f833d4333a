"""excov - find example configurations that have no tests."""

__version__ = "0.1.0"
