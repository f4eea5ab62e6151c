"""Model translation."""

from .service import ModelTranslator

__all__ = ["ModelTranslator"]
