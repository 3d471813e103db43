"""Exceptions raised by the inflection engines, the registry and the facade.

Each exception wraps an ``AppError`` so the HTTP layer can render it without
knowing which engine raised it.
"""
from __future__ import annotations

from .types import AppError, ErrorCode


class AppErrorException(Exception):
    """Exception wrapper for AppError."""

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(error.message)

    @property
    def code(self) -> ErrorCode:
        return self.error.code


class DeclensionError(AppErrorException):
    """Base class for every failure of an inflection call."""

    code_default: ErrorCode = ErrorCode.E9000_INTERNAL_GENERIC

    def __init__(self, message: str, *, origin: str = "", **metadata):
        super().__init__(AppError(
            code=self.code_default,
            message=message,
            origin=origin,
            metadata={k: v for k, v in metadata.items() if v is not None},
        ))


class InvalidInputError(DeclensionError):
    """The word is empty, blank or not a string, or an option is malformed."""

    code_default = ErrorCode.E2002_INVALID_INPUT


class InvalidPolicyError(InvalidInputError):
    """The name group policy is not phrase, name or auto."""

    code_default = ErrorCode.E2004_INVALID_POLICY


class UnknownCaseError(DeclensionError):
    """The case identifier is not one the engine recognizes."""

    code_default = ErrorCode.E2003_UNKNOWN_CASE


class UnsupportedLanguageError(DeclensionError):
    """No engine is registered for the language code."""

    code_default = ErrorCode.E4010_UNSUPPORTED_LANGUAGE


class RegistryFrozenError(RuntimeError):
    """Raised when registering an engine after the registry was frozen."""
