"""Model contracts."""

from .contracts import Translatable, ensure_translatable

__all__ = ["Translatable", "ensure_translatable"]
