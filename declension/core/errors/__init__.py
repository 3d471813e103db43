"""Error handling for the inflection engines.

Usage:
    from declension.core.errors import UnknownCaseError

    try:
        engine.inflect_word("дос", "bogus")
    except UnknownCaseError as exc:
        log.warning(exc.error.message, code=exc.code.name)
"""
from .types import AppError, ErrorCode
from .exceptions import (
    AppErrorException,
    DeclensionError,
    InvalidInputError,
    InvalidPolicyError,
    RegistryFrozenError,
    UnknownCaseError,
    UnsupportedLanguageError,
)

__all__ = [
    "AppError",
    "ErrorCode",
    "AppErrorException",
    "DeclensionError",
    "InvalidInputError",
    "InvalidPolicyError",
    "RegistryFrozenError",
    "UnknownCaseError",
    "UnsupportedLanguageError",
]
