"""DeepL API client."""

import logging
from typing import Any, Optional

import requests

from ..config import DeeplConfig
from ..errors import MalformedResponseError
from .markup import strip_tags

logger = logging.getLogger(__name__)


class DeeplClient:
    """Translates single strings through the DeepL HTTP API.

    Every call to :meth:`translate` makes exactly one blocking request.
    Nothing is retried or cached; transport errors from ``requests`` are
    passed on to the caller.
    """

    def __init__(
        self,
        config: Optional[DeeplConfig] = None,
        session: Optional[requests.Session] = None
    ):
        """Initialize the client.

        Args:
            config: DeepL configuration. Uses defaults if not provided.
            session: HTTP session to send requests with.
        """
        self.config = config or DeeplConfig()
        self.session = session or requests.Session()

    def build_params(
        self,
        text: str,
        target_lang: str,
        source_lang: Optional[str] = None
    ) -> dict[str, str]:
        """Build the request parameters for a single text.

        Args:
            text: Text to translate.
            target_lang: Target language code.
            source_lang: Source language code. Uses the configured fallback
                locale if not provided.

        Returns:
            Parameters for the DeepL request.
        """
        return {
            "auth_key": self.config.api_token,
            "text": strip_tags(text, self.config.allowed_tags),
            "source_language": self.config.resolve_source_language(source_lang),
            "target_lang": target_lang.upper(),
        }

    def translate(
        self,
        text: str,
        target_lang: str,
        source_lang: Optional[str] = None
    ) -> str:
        """Translate text to the target language.

        Args:
            text: Text to translate.
            target_lang: Target language code.
            source_lang: Source language code. Uses the configured fallback
                locale if not provided.

        Returns:
            Translated text.

        Raises:
            requests.RequestException: On network failure or a non-2xx status.
            MalformedResponseError: If the response has no translated text.
        """
        params = self.build_params(text, target_lang, source_lang)
        logger.debug(
            "Requesting DeepL translation %s -> %s (%d chars)",
            params["source_language"], params["target_lang"], len(params["text"])
        )

        response = self.session.post(
            self.config.api_url,
            params=params,
            timeout=self.config.timeout
        )
        response.raise_for_status()

        return self.parse_response(response.json())

    @staticmethod
    def parse_response(payload: Any) -> str:
        """Extract ``translations[0].text`` from a decoded DeepL response.

        Args:
            payload: Decoded JSON body.

        Returns:
            The translated text.

        Raises:
            MalformedResponseError: If the path is missing or not a string.
        """
        try:
            text = payload["translations"][0]["text"]
        except (KeyError, IndexError, TypeError) as e:
            raise MalformedResponseError(payload) from e

        if not isinstance(text, str):
            raise MalformedResponseError(payload)

        return text
