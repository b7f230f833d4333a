"""Configuration system for excov."""

from excov.config.loader import load_config
from excov.config.schema import ExcovConfig

__all__ = ["load_config", "ExcovConfig"]
