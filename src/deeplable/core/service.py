"""Model translation service."""

import logging
from typing import Any, Iterable, Optional

from ..config import DeeplConfig
from ..models import ensure_translatable
from ..translation import DeeplClient

logger = logging.getLogger(__name__)


class ModelTranslator:
    """Translates the attributes of Translatable models and stores the result.

    Translations are written back through the model's ``update`` method as a
    single bundle keyed by target language::

        {"fr": {"title": "Bonjour", "body": "..."}}
    """

    def __init__(
        self,
        client: Optional[DeeplClient] = None,
        config: Optional[DeeplConfig] = None
    ):
        """Initialize the model translator.

        Args:
            client: DeepL client. Built from ``config`` if not provided.
            config: DeepL configuration, used only when ``client`` is None.
        """
        self.client = client or DeeplClient(config)

    def translate_model(
        self,
        model: Any,
        target_lang: str,
        source_lang: Optional[str] = None
    ) -> None:
        """Translate all translated attributes of a model.

        Attributes are translated one at a time in declared order. Empty
        attributes are skipped and left out of the stored bundle. If any
        request fails, nothing is stored.

        Args:
            model: A model implementing the Translatable contract.
            target_lang: Target language code, also used as the update key.
            source_lang: Source language code. Uses the client's fallback
                locale if not provided.

        Raises:
            TranslatableContractError: If the model isn't translatable.
        """
        model = ensure_translatable(model)

        translations: dict[str, str] = {}
        for attribute in model.translated_attributes:
            value = model[attribute]
            if not value:
                logger.debug("Skipping empty attribute %r", attribute)
                continue
            translations[attribute] = self.client.translate(
                value, target_lang, source_lang
            )

        model.update({target_lang: translations})
        logger.info(
            "Stored %d translated attributes for %s in %r",
            len(translations), type(model).__name__, target_lang
        )

    def translate_model_attribute(
        self,
        model: Any,
        attr: str,
        target_lang: str,
        source_lang: Optional[str] = None
    ) -> None:
        """Translate a single attribute of a model.

        Unlike :meth:`translate_model`, an empty value is still sent to DeepL;
        a missing (None) value is sent as an empty string.

        Args:
            model: A model implementing the Translatable contract.
            attr: Name of the attribute to translate.
            target_lang: Target language code, also used as the update key.
            source_lang: Source language code.

        Raises:
            TranslatableContractError: If the model isn't translatable.
        """
        model = ensure_translatable(model)

        value = model[attr]
        if value is None:
            value = ""

        translation = self.client.translate(value, target_lang, source_lang)

        model.update({target_lang: {attr: translation}})
        logger.info(
            "Stored translated attribute %r for %s in %r",
            attr, type(model).__name__, target_lang
        )

    def translate_model_to_all(
        self,
        model: Any,
        target_langs: Iterable[str],
        source_lang: Optional[str] = None
    ) -> None:
        """Translate a model into several target languages, one after another.

        Each language is stored as soon as it is translated, so a failure
        leaves the languages before it in place.

        Args:
            model: A model implementing the Translatable contract.
            target_langs: Target language codes.
            source_lang: Source language code.
        """
        ensure_translatable(model)

        for target_lang in target_langs:
            self.translate_model(model, target_lang, source_lang)
