"""Exceptions raised by the template → PDF pipeline."""

from __future__ import annotations

from pathlib import Path


class OfficeTemplatePdfError(Exception):
    """Base class for every error this package raises."""


class ConfigurationError(OfficeTemplatePdfError):
    pass


class MissingApiKeyError(ConfigurationError):
    def __init__(self, variable: str) -> None:
        super().__init__(f"{variable} is not defined in the environment variables.")
        self.variable = variable


class DataLoadError(OfficeTemplatePdfError):
    """The JSON data file could not be read or parsed."""

    def __init__(self, path: str | Path, message: str) -> None:
        super().__init__(f"Error loading JSON data from {path}: {message}")
        self.path = Path(path)
        self.message = message


class SdkInitializationError(OfficeTemplatePdfError):
    pass


class ConversionError(OfficeTemplatePdfError):
    """Template loading, filling or saving failed."""
