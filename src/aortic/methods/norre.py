"""
NORRE (Echo) method: height-indexed diameter.
"""

from aortic.config import DEFAULT_CONFIG, ReferenceConfig
from aortic.conversions import cm_to_m, diameter_to_area, mm_to_cm
from aortic.models import Demographics, NormativeResult, Sex

KEY = "norre"
LABEL = "NORRE (Echo) - Height-indexed"


def norre_uln(sex: Sex, height_cm, config: ReferenceConfig = DEFAULT_CONFIG):
    """
    Upper-limit diameter (cm).

    The indexed limit is in mm per meter of height, so the product is
    converted from mm to cm.
    """
    diameter_mm = config.norre.for_sex(sex) * cm_to_m(height_cm)
    return mm_to_cm(diameter_mm)


def result(
    demographics: Demographics, config: ReferenceConfig = DEFAULT_CONFIG
) -> NormativeResult:
    diameter = norre_uln(demographics.sex, demographics.height_cm, config)
    return NormativeResult(
        method=KEY,
        sex=demographics.sex,
        index=config.norre.for_sex(demographics.sex),
        area=float(diameter_to_area(diameter)),
        diameter=float(diameter),
    )
