"""Configuration for the DeepL translation client."""

from dataclasses import dataclass, field
from typing import Optional


DEFAULT_API_URL = "https://api-free.deepl.com/v2/translate"
DEFAULT_FALLBACK_LOCALE = "en"

# Markup kept in the text sent to DeepL; everything else is stripped
DEFAULT_ALLOWED_TAGS = (
    "h1", "h2", "h3", "h4", "h5", "h6",
    "p", "br", "div", "span", "strong", "b",
)


@dataclass
class DeeplConfig:
    """Configuration for the DeepL client.

    Attributes:
        api_url: Translation endpoint URL.
        api_token: DeepL authentication key, sent as ``auth_key``.
        fallback_locale: Source language used when a call doesn't give one.
        allowed_tags: Markup tags preserved in the text before transmission.
        timeout: Request timeout in seconds. None leaves it to requests.
    """
    api_url: str = DEFAULT_API_URL
    api_token: str = ""
    fallback_locale: str = DEFAULT_FALLBACK_LOCALE
    allowed_tags: tuple[str, ...] = field(default=DEFAULT_ALLOWED_TAGS)
    timeout: Optional[float] = None

    def resolve_source_language(self, source_lang: Optional[str] = None) -> str:
        """Get the uppercased source language to send to DeepL.

        Args:
            source_lang: Source language code. Falls back to
                ``fallback_locale`` when empty or None.

        Returns:
            Uppercased language code (e.g., "EN").
        """
        return (source_lang or self.fallback_locale).upper()
