from __future__ import annotations
from typing import List
from .base import BasePicker, REGISTRY, register

from . import random_consistent  # noqa: F401
from . import letter_freq  # noqa: F401
from . import positional_freq  # noqa: F401

DEFAULT_PICKER = "random_consistent"


def create_picker(picker_id: str) -> BasePicker:
    """
    Factory: instantiate a registered picker by id.
    """
    try:
        cls = REGISTRY[picker_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown picker id: {picker_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def get_picker_ids() -> List[str]:
    """
    Return all registered picker ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
