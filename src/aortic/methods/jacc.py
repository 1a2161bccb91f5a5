"""
JACC (CMR) method: age-dependent area/height index.

The upper-limit index (cm²/m) grows linearly with age with sex-specific slope
and intercept. Multiplying by height in meters gives the absolute cross-
sectional area, which is converted to an equivalent circular diameter.
"""

from aortic.config import DEFAULT_CONFIG, ReferenceConfig
from aortic.conversions import area_to_diameter, cm_to_m
from aortic.models import Demographics, NormativeResult, Sex

KEY = "jacc"
LABEL = "JACC (CMR) - Area/Height"


def area_height_index(age, sex: Sex, config: ReferenceConfig = DEFAULT_CONFIG):
    """Upper-limit area/height index (cm²/m) at ``age`` years."""
    slope = config.jacc.slope.for_sex(sex)
    intercept = config.jacc.intercept.for_sex(sex)
    return age * slope + intercept


def absolute_area(index, height_m):
    """Absolute area (cm²) from an area/height index and height in meters."""
    return index * height_m


def jacc_area(age, sex: Sex, height_cm, config: ReferenceConfig = DEFAULT_CONFIG):
    """Upper-limit area (cm²)."""
    return absolute_area(area_height_index(age, sex, config), cm_to_m(height_cm))


def jacc_uln(age, sex: Sex, height_cm, config: ReferenceConfig = DEFAULT_CONFIG):
    """Upper-limit diameter (cm)."""
    return area_to_diameter(jacc_area(age, sex, height_cm, config))


def normative_result(
    age, sex: Sex, height_m, config: ReferenceConfig = DEFAULT_CONFIG
) -> NormativeResult:
    """Index, area and diameter at ``height_m`` meters."""
    index = area_height_index(age, sex, config)
    area = absolute_area(index, height_m)
    return NormativeResult(
        method=KEY,
        sex=Sex(sex),
        index=float(index),
        area=float(area),
        diameter=float(area_to_diameter(area)),
    )


def result(
    demographics: Demographics, config: ReferenceConfig = DEFAULT_CONFIG
) -> NormativeResult:
    return normative_result(
        demographics.age, demographics.sex, demographics.height_m, config
    )
