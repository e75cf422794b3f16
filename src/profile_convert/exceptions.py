"""
exceptions.py

Typed exception hierarchy used across the profile conversion pipeline.
Every fatal condition of a run maps to exactly one subclass; non-fatal
conditions (unknown actions, manually modified values) are only logged.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

# --------------------------------------------------------------------------- #
#                              Base hierarchy                                 #
# --------------------------------------------------------------------------- #


class ProfileConvertError(Exception):
    """Root of all errors raised by this project."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.context = context or {}

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.error_code:
            base_msg = f"[{self.error_code}] {base_msg}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg = f"{base_msg} (Context: {context_str})"
        return base_msg


class ConfigurationError(ProfileConvertError):
    """Raised when a required command-line argument is missing."""

    def __init__(self, message: str, option: str | None = None) -> None:
        context = {}
        if option:
            context["option"] = option
        super().__init__(message, "CONFIGURATION_ERROR", context)

    def get_recovery_hint(self) -> str:
        if "option" in self.context:
            return f"Pass the '{self.context['option']}' option"
        return "Run with --help to list the available options"


class DocumentLoadError(ProfileConvertError):
    """
    Raised by the I/O layer when a document cannot be read.

    Examples
    --------
    * File does not exist
    * Path is a directory or is not readable
    """

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        context = {}
        if path is not None:
            context["path"] = str(path)
        super().__init__(message, "DOCUMENT_LOAD_ERROR", context)

    def get_recovery_hint(self) -> str:
        return "Check that the file exists and is readable"


class DocumentParseError(ProfileConvertError):
    """
    Raised when a document is not valid JSON / YAML, or does not have the
    profile or rule shape (e.g. a parameter value that is a number).
    """

    def __init__(
        self,
        message: str,
        document: str | None = None,
        path: str | Path | None = None,
    ) -> None:
        context = {}
        if document:
            context["document"] = document
        if path is not None:
            context["path"] = str(path)
        super().__init__(message, "DOCUMENT_PARSE_ERROR", context)

    def get_recovery_hint(self) -> str:
        return "The document must be a JSON object whose parameter and rule fields are strings"


class ProfileValidationError(ProfileConvertError):
    """Raised when the profile does not carry the parameters the rules require."""

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        actual_value: str | None = None,
        expected_value: str | None = None,
    ) -> None:
        context = {}
        if parameter:
            context["parameter"] = parameter
        if actual_value is not None:
            context["actual_value"] = actual_value
        if expected_value is not None:
            context["expected_value"] = expected_value
        super().__init__(message, "VALIDATION_ERROR", context)

    def get_recovery_hint(self) -> str:
        return (
            "The profile is not the version these rules convert from; "
            "use matching rules or update the profile manually"
        )


class OutputWriteError(ProfileConvertError):
    """Raised when the converted profile cannot be written."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        context = {}
        if path is not None:
            context["path"] = str(path)
        super().__init__(message, "OUTPUT_WRITE_ERROR", context)
