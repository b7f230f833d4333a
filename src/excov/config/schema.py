"""Pydantic v2 models for excov configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CheckConfig(BaseModel):
    examples_directory: str = "examples"
    tests_directory: str = "tests"
    filter: str = ".tftest.hcl"


class ScanConfig(BaseModel):
    workers: int = Field(default=1, ge=1)
    fail_fast: bool = True


class LoggingConfig(BaseModel):
    level: str = "info"
    json_output: bool = False


class ExcovConfig(BaseModel):
    """Root configuration model for excov."""

    check: CheckConfig = Field(default_factory=CheckConfig)
    scan: ScanConfig = Field(default_factory=ScanConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
