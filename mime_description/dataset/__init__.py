"""mime_description/dataset/__init__.py — public API of the dataset package."""

from mime_description.dataset.registry import DESCRIPTIONS, freeze, get, get_all, validate

__all__ = [
    "DESCRIPTIONS",
    "freeze",
    "get",
    "get_all",
    "validate",
]
