"""
Descriptor shared by all reference methods.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from aortic.models import Demographics, NormativeResult


@dataclass(frozen=True)
class ReferenceMethod:
    """
    A published reference method for the ascending aorta upper limit.

    Each method module provides a pure ``result`` function mapping
    Demographics to a NormativeResult. Methods that need weight are skipped
    when Demographics carries none.

    Attributes:
        key: Short identifier used for series keys and lookups.
        label: Display label, e.g. ``"JACC (CMR) - Area/Height"``.
        modality: Imaging modality the limits were derived from.
        requires_weight: Whether the method depends on BSA.
        result: Builder returning the NormativeResult.
    """

    key: str
    label: str
    modality: str
    requires_weight: bool
    result: Callable[..., Optional[NormativeResult]]

    def is_computable(self, demographics: Demographics) -> bool:
        return not self.requires_weight or demographics.weight_kg is not None
