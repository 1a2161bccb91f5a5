"""
ASE (Echo) method: BSA-indexed diameter.
"""

from typing import Optional

from aortic.bsa import dubois_bsa
from aortic.config import DEFAULT_CONFIG, ReferenceConfig
from aortic.conversions import diameter_to_area
from aortic.models import Demographics, NormativeResult, Sex

KEY = "ase"
LABEL = "ASE (Echo) - BSA-indexed"


def ase_uln(sex: Sex, height_cm, weight_kg, config: ReferenceConfig = DEFAULT_CONFIG):
    """Upper-limit diameter (cm): indexed limit (cm/m²) times DuBois BSA."""
    return config.ase.for_sex(sex) * dubois_bsa(height_cm, weight_kg)


def result(
    demographics: Demographics, config: ReferenceConfig = DEFAULT_CONFIG
) -> Optional[NormativeResult]:
    """Upper limit for ``demographics``, or None when no weight is given."""
    if demographics.weight_kg is None:
        return None
    diameter = ase_uln(
        demographics.sex, demographics.height_cm, demographics.weight_kg, config
    )
    return NormativeResult(
        method=KEY,
        sex=demographics.sex,
        index=config.ase.for_sex(demographics.sex),
        area=float(diameter_to_area(diameter)),
        diameter=float(diameter),
    )
