"""Error codes and the payload every inflection failure carries."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ErrorCode(Enum):
    """Numeric codes; the thousands digit says who is at fault.

    E2xxx: the caller sent a word, case or policy the engines reject
    E4xxx: no engine is registered for the requested language
    E9xxx: a fault inside the service
    """
    E2000_VALIDATION_GENERIC = 2000
    E2002_INVALID_INPUT = 2002
    E2003_UNKNOWN_CASE = 2003
    E2004_INVALID_POLICY = 2004

    E4010_UNSUPPORTED_LANGUAGE = 4010

    E9000_INTERNAL_GENERIC = 9000

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self.value // 1000]

    @property
    def category(self) -> str:
        return _CATEGORY[self.value // 1000]


_HTTP_STATUS = {2: 400, 4: 404, 9: 500}
_CATEGORY = {2: "validation", 4: "lookup", 9: "internal"}


@dataclass(frozen=True, slots=True)
class AppError:
    """A rejected inflection call.

    ``origin`` names the step that rejected it (``ru.inflect_word``,
    ``registry``, ``policy``). ``metadata`` holds the offending input and,
    where there is a closed set, the allowed values.
    """
    code: ErrorCode
    message: str
    origin: str = ""
    metadata: dict = field(default_factory=dict)

    def to_dict(self, correlation_id: str | None = None) -> dict:
        body = {
            "code": self.code.name,
            "code_num": self.code.value,
            "message": self.message,
            "category": self.code.category,
            "origin": self.origin,
            "metadata": self.metadata,
        }
        if correlation_id is not None:
            body["correlation_id"] = correlation_id
        return {"error": body}

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"
