"""Language engine registry.

Built once at startup by `build_registry` and frozen; after that it is
read-only and safe to share between threads and requests.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from declension.core.errors import RegistryFrozenError, UnsupportedLanguageError
from declension.core.logging import registry_logger
from .base import LanguageEngine

if TYPE_CHECKING:
    from declension.core.config import Settings

log = registry_logger()


class LanguageRegistry:
    """Maps language codes to engines."""

    __slots__ = ("_engines", "_frozen")

    def __init__(self):
        self._engines: dict[str, LanguageEngine] = {}
        self._frozen = False

    def register(self, code: str, engine: LanguageEngine) -> None:
        """Register an engine under a language code."""
        if self._frozen:
            raise RegistryFrozenError(f"Cannot register '{code}': registry is frozen")
        self._engines[code] = engine
        log.debug("language_registered", code=code, engine=type(engine).__name__)

    def freeze(self) -> LanguageRegistry:
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, code: str) -> LanguageEngine:
        """Get the engine for a language code."""
        engine = self._engines.get(code)
        if engine is None:
            available = ", ".join(self._engines) or "none"
            raise UnsupportedLanguageError(
                f"Language '{code}' is not supported. Available: {available}",
                origin="registry",
                language=str(code),
            )
        return engine

    def __contains__(self, code: object) -> bool:
        return code in self._engines

    def codes(self) -> list[str]:
        return list(self._engines)

    def engines(self) -> MappingProxyType:
        return MappingProxyType(self._engines)

    def list_languages(self) -> list[dict]:
        """List all registered languages."""
        return [
            {"code": code, "name": e.name, "nativeName": e.native_name}
            for code, e in self._engines.items()
        ]


def build_registry(settings: Settings | None = None) -> LanguageRegistry:
    """Create and freeze the registry with the Russian and Kazakh engines."""
    from .kazakh import KazakhEngine
    from .russian import RussianEngine

    strict = settings.STRICT_CASES if settings is not None else False
    registry = LanguageRegistry()
    russian = RussianEngine(strict_cases=strict)
    kazakh = KazakhEngine()
    registry.register(russian.code, russian)
    registry.register(kazakh.code, kazakh)
    registry.register("kk", kazakh)  # ISO 639-1 code for Kazakh
    log.info("registry_built", languages=registry.codes(), strict_cases=strict)
    return registry.freeze()
