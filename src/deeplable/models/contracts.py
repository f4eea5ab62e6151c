"""Contract for models that store per-language attributes."""

from typing import Any, Mapping, Protocol, Sequence, runtime_checkable

from ..errors import TranslatableContractError


@runtime_checkable
class Translatable(Protocol):
    """Protocol for models that can be translated.

    The host model framework owns persistence. ``update`` receives a mapping
    keyed by language code, e.g. ``{"fr": {"title": "Bonjour"}}``, and decides
    itself whether that bundle replaces or merges with what is stored.
    """

    translated_attributes: Sequence[str]

    def __getitem__(self, key: str) -> Any:
        """Return the current value of an attribute."""
        ...

    def update(self, values: Mapping[str, Any]) -> Any:
        """Persist a mapping of field name to value."""
        ...


def ensure_translatable(model: Any) -> Translatable:
    """Check that a model implements the Translatable contract.

    Args:
        model: The model to check.

    Returns:
        The model itself.

    Raises:
        TranslatableContractError: If the model lacks part of the contract.
    """
    if not isinstance(model, Translatable):
        raise TranslatableContractError(model)
    return model
