"""
Registry of the reference methods.

Methods are listed in display order: the CMR area/height method first, then
the two echo methods.
"""

from typing import Dict

from aortic.config import DEFAULT_CONFIG, ReferenceConfig
from aortic.models import Demographics, NormativeResult

from . import ase, jacc, norre
from .base import ReferenceMethod


def _build_registry() -> Dict[str, ReferenceMethod]:
    """Build the registry from the method modules."""
    methods = [
        ReferenceMethod(jacc.KEY, jacc.LABEL, "CMR", False, jacc.result),
        ReferenceMethod(norre.KEY, norre.LABEL, "Echo", False, norre.result),
        ReferenceMethod(ase.KEY, ase.LABEL, "Echo", True, ase.result),
    ]
    return {m.key: m for m in methods}


# Global registry instance
registry = _build_registry()


def calculate_all(
    demographics: Demographics, config: ReferenceConfig = DEFAULT_CONFIG
) -> Dict[str, NormativeResult]:
    """
    Evaluate every method whose inputs are available.

    Args:
        demographics: Age, sex, height and optional weight.
        config: Reference constants.

    Returns:
        Mapping of method key to NormativeResult, in registry order. The
        BSA-indexed method is omitted when weight is missing.
    """
    return {
        key: method.result(demographics, config)
        for key, method in registry.items()
        if method.is_computable(demographics)
    }


__all__ = ["registry", "calculate_all", "ReferenceMethod", "jacc", "norre", "ase"]
