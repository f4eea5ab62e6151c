"""DeepL client and markup handling."""

from .client import DeeplClient
from .markup import strip_tags

__all__ = ["DeeplClient", "strip_tags"]
