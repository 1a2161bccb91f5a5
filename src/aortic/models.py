"""
Immutable value records shared by the calculators, the comparison step and the
chart data generator.

Every record is rebuilt on each recalculation; nothing here is mutated or
persisted.
"""

from enum import Enum
from typing import List, Literal, Optional, Tuple

import pandas as pd
from pydantic import BaseModel, ConfigDict, PositiveFloat

MeasuredType = Literal["area", "diameter"]
ChartType = Literal["area", "diameter"]
Direction = Literal["above", "below", "at"]


class Sex(str, Enum):
    """Binary sex category used to select per-sex constants."""

    FEMALE = "F"
    MALE = "M"

    @property
    def label(self) -> str:
        return "Female" if self is Sex.FEMALE else "Male"


class Demographics(BaseModel):
    """
    Demographic and anthropometric inputs.

    Height and weight are canonical units (cm, kg). Weight is only needed by
    the BSA-indexed method.
    """

    model_config = ConfigDict(frozen=True)

    age: float
    sex: Sex
    height_cm: PositiveFloat
    weight_kg: Optional[PositiveFloat] = None

    @property
    def height_m(self) -> float:
        return self.height_cm / 100.0

    @property
    def bmi(self) -> Optional[float]:
        if self.weight_kg is None:
            return None
        return self.weight_kg / self.height_m ** 2


class NormativeResult(BaseModel):
    """
    Upper limit computed by one reference method for one sex.

    ``index`` is expressed in the method's own indexing unit: cm²/m for the
    area/height method, mm/m for the height-indexed method and cm/m² for the
    BSA-indexed method.
    """

    model_config = ConfigDict(frozen=True)

    method: str
    sex: Sex
    index: float
    area: float
    diameter: float


class UserMeasurement(BaseModel):
    """Observed aortic size normalized to area and diameter."""

    model_config = ConfigDict(frozen=True)

    value: float
    measured_type: MeasuredType
    area: float
    diameter: float
    index: float


class Comparison(BaseModel):
    """Signed percent deviation of an observed value from an upper limit."""

    model_config = ConfigDict(frozen=True)

    target: str
    observed: float
    reference: float
    percent_deviation: float

    @property
    def direction(self) -> Direction:
        if self.percent_deviation > 0:
            return "above"
        if self.percent_deviation < 0:
            return "below"
        return "at"

    def describe(self) -> str:
        """
        Human-readable classification, e.g. ``12.3% above female upper limit``.
        """
        if self.direction == "above":
            return f"{self.percent_deviation:.1f}% above {self.target} upper limit"
        if self.direction == "below":
            return f"{abs(self.percent_deviation):.1f}% below {self.target} upper limit"
        return f"At {self.target} upper limit"


class ChartSeries(BaseModel):
    """
    Ordered (height_cm, value) points for one plotted series.

    Reference curves span the height domain; marker series hold a single point
    at the user's height.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    method: Optional[str] = None
    sex: Optional[Sex] = None
    kind: Literal["curve", "marker"] = "curve"
    points: List[Tuple[float, float]]

    @property
    def x(self) -> List[float]:
        return [p[0] for p in self.points]

    @property
    def y(self) -> List[float]:
        return [p[1] for p in self.points]

    def __len__(self) -> int:
        return len(self.points)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.points, columns=["height_cm", "value"])


class Advisory(BaseModel):
    """Non-blocking warning for an input outside its plausible range."""

    model_config = ConfigDict(frozen=True)

    field: str
    value: float
    message: str
