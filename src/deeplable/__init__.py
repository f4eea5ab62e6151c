"""DeepL machine translation for translatable models."""

from .config import DeeplConfig
from .core import ModelTranslator
from .errors import DeeplableError, MalformedResponseError, TranslatableContractError
from .models import Translatable
from .translation import DeeplClient

__version__ = "0.1.0"

__all__ = [
    "DeeplClient",
    "DeeplConfig",
    "DeeplableError",
    "MalformedResponseError",
    "ModelTranslator",
    "Translatable",
    "TranslatableContractError",
]
