"""
Reference constants for the aortic upper-limit methods.

Values are the published mean + 2 SD limits for each method. They are grouped
in validated pydantic models so alternative constant sets can be supplied.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictFloat, field_validator

from aortic.models import Sex


class SexPair(BaseModel):
    """
    One constant per sex.
    """

    model_config = ConfigDict(frozen=True)

    female: StrictFloat
    male: StrictFloat

    def for_sex(self, sex: Sex) -> float:
        return self.female if Sex(sex) is Sex.FEMALE else self.male


class LinearIndexConstants(BaseModel):
    """
    Linear-in-age index: index = age * slope + intercept.
    """

    model_config = ConfigDict(frozen=True)

    slope: SexPair
    intercept: SexPair


class PlausibleRange(BaseModel):
    """
    Range used for non-blocking advisories.
    """

    model_config = ConfigDict(frozen=True)

    min: StrictFloat
    max: StrictFloat

    @field_validator("max", mode="after")
    @classmethod
    def min_lt_max(cls, v: float, info: Any) -> float:
        """Validate that min < max."""
        lower = info.data.get("min", float("inf"))
        if v <= lower:
            raise ValueError("max must be > min")
        return v

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


class HeightDomain(BaseModel):
    """
    Height domain (cm) sampled for reference curves.
    """

    model_config = ConfigDict(frozen=True)

    min_cm: StrictFloat
    max_cm: StrictFloat
    step_cm: StrictFloat

    @field_validator("max_cm", mode="after")
    @classmethod
    def min_lt_max(cls, v: float, info: Any) -> float:
        """Validate that min_cm < max_cm."""
        if info.data.get("min_cm", float("inf")) >= v:
            raise ValueError("min_cm must be < max_cm")
        return v

    @field_validator("step_cm", mode="after")
    @classmethod
    def step_positive(cls, v: float) -> float:
        """Validate that step_cm > 0."""
        if v <= 0:
            raise ValueError("step_cm must be > 0")
        return v


class ReferenceConfig(BaseModel):
    """
    Complete constant set for all methods, the chart domain and advisories.
    """

    model_config = ConfigDict(frozen=True)

    # JACC (CMR): area/height index, cm²/m
    jacc: LinearIndexConstants = LinearIndexConstants(
        slope=SexPair(female=0.0327, male=0.04),
        intercept=SexPair(female=3.68, male=3.74),
    )
    # NORRE (Echo): aortic diameter at leading edge, mm/m (16.7 + 2x2.2, 17.0 + 2x2.2)
    norre: SexPair = SexPair(female=21.1, male=21.4)
    # ASE (Echo): proximal ascending aorta, cm/m² (1.6 + 2x0.3, 1.5 + 2x0.2)
    ase: SexPair = SexPair(female=2.2, male=1.9)

    height_domain: HeightDomain = HeightDomain(min_cm=140.0, max_cm=210.0, step_cm=5.0)
    age_range: PlausibleRange = PlausibleRange(min=40.0, max=70.0)
    height_range: PlausibleRange = PlausibleRange(min=140.0, max=210.0)


DEFAULT_CONFIG = ReferenceConfig()

# Unit factors
CM_PER_INCH = 2.54
LBS_PER_KG = 2.20462

# DuBois BSA coefficients
DUBOIS_COEFFICIENT = 0.007184
DUBOIS_HEIGHT_EXPONENT = 0.725
DUBOIS_WEIGHT_EXPONENT = 0.425
