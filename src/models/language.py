"""
Language directory used to spell out target languages in prompts.
"""
from typing import Dict, List

from pydantic import BaseModel

# The model performs better with a spelled-out language name than a code.
LANGUAGE_NAMES: Dict[str, str] = {
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "pt": "Portuguese",
    "zh": "Chinese",
    "ja": "Japanese",
    "ko": "Korean",
    "ar": "Arabic",
    "hi": "Hindi",
    "ru": "Russian",
}


class Language(BaseModel):
    code: str
    name: str


def language_name_for(code: str) -> str:
    """Return the display name for a code, or the code itself when unknown."""
    return LANGUAGE_NAMES.get(code, code)


def supported_languages() -> List[Language]:
    return [Language(code=code, name=name) for code, name in LANGUAGE_NAMES.items()]
