"""Exceptions raised by deeplable.

Transport failures are not wrapped: ``requests`` exceptions reach the caller
unchanged.
"""

from typing import Any


class DeeplableError(Exception):
    """Base exception for deeplable."""

    pass


class TranslatableContractError(DeeplableError, TypeError):
    """A model was passed that can't store translations.

    Raised before any request is made. Not retryable: the model class has to
    implement the translatable contract first.
    """

    def __init__(self, model: Any):
        self.model = model
        super().__init__(
            f"Translated models must implement the Translatable contract "
            f"(translated_attributes, item access and update()); "
            f"got {type(model).__name__}."
        )


class MalformedResponseError(DeeplableError):
    """The DeepL response didn't contain ``translations[0].text``."""

    def __init__(self, payload: Any):
        self.payload = payload
        super().__init__(
            f"DeepL response is missing translations[0].text: {payload!r}"
        )
