from __future__ import annotations

from dataclasses import dataclass

from ..errors import FrontgenError

LANGUAGES = ("ts", "js")


@dataclass(frozen=True)
class GenerationProfile:
    language: str
    typed_bindings: bool
    extension: str

    @classmethod
    def from_language(cls, language: str) -> "GenerationProfile":
        normalized = language.lower()
        if normalized in {"ts", "typescript"}:
            return cls(language="ts", typed_bindings=True, extension=".ts")
        if normalized in {"js", "javascript"}:
            return cls(language="js", typed_bindings=False, extension=".js")
        raise FrontgenError(f"Unsupported language: {language!r} (expected one of {', '.join(LANGUAGES)})")
