"""Languages API Routes

Lists registered languages and their case inventories.
"""
from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from declension.core.logging import api_logger
from declension.languages.registry import LanguageRegistry

log = api_logger()

router = APIRouter()


def get_registry(request: Request) -> LanguageRegistry:
    return request.app.state.registry


# === Response Models ===

class CaseResponse(BaseModel):
    id: str
    label: str
    nativeLabel: str
    hint: str


class GrammarConfigResponse(BaseModel):
    cases: list[CaseResponse]
    baseCase: str
    policies: list[str]


class LanguageInfoResponse(BaseModel):
    code: str
    name: str
    nativeName: str


# === Endpoints ===

@router.get("", response_model=list[LanguageInfoResponse])
async def get_available_languages(registry: LanguageRegistry = Depends(get_registry)):
    """Get list of available languages."""
    return registry.list_languages()


@router.get("/{lang_code}", response_model=LanguageInfoResponse)
async def get_language_info(lang_code: str, registry: LanguageRegistry = Depends(get_registry)):
    """Get language info by code."""
    engine = registry.get(lang_code)
    return LanguageInfoResponse(code=lang_code, name=engine.name, nativeName=engine.native_name)


@router.get("/{lang_code}/grammar", response_model=GrammarConfigResponse)
async def get_grammar_config(lang_code: str, registry: LanguageRegistry = Depends(get_registry)):
    """Get the case inventory for a language."""
    config = registry.get(lang_code).get_grammar_config()
    log.debug("grammar_config_fetched", language=lang_code)
    return config.to_dict()
