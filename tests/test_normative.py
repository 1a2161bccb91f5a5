# Tests for normative values and user measurement comparison

import logging

import pytest

from aortic.methods import calculate_all, jacc
from aortic.models import Sex
from aortic.normative import (
    calculate_normative_values,
    compare,
    compare_to_methods,
    compare_to_sexes,
    normative_for,
    percent_deviation,
    user_measurement,
)


class TestNormativeValues:
    """Tests for calculate_normative_values"""

    def test_tc001_both_sexes(self) -> None:
        normative = calculate_normative_values(55, 1.65)
        assert set(normative) == {Sex.FEMALE, Sex.MALE}

    def test_tc002_female_example(self) -> None:
        female = calculate_normative_values(55, 1.65)[Sex.FEMALE]
        assert female.index == pytest.approx(5.4785)
        assert female.area == pytest.approx(9.0395, abs=1e-4)
        assert female.diameter == pytest.approx(3.394, abs=2e-3)

    def test_tc003_male_example(self) -> None:
        male = calculate_normative_values(55, 1.65)[Sex.MALE]
        assert male.index == pytest.approx(5.94)
        assert male.area == pytest.approx(9.801)

    def test_tc004_normative_for_demographics(self, female_demographics) -> None:
        assert normative_for(female_demographics) == calculate_normative_values(55, 1.65)


class TestUserMeasurement:
    """Tests for user_measurement"""

    def test_tc005_diameter_input(self) -> None:
        m = user_measurement(3.5, "diameter", 1.65)
        assert m is not None
        assert m.diameter == 3.5
        assert m.area == pytest.approx(9.6211, abs=1e-4)
        assert m.index == pytest.approx(m.area / 1.65)

    def test_tc006_area_input(self) -> None:
        m = user_measurement(9.0395, "area", 1.65)
        assert m.area == 9.0395
        assert m.diameter == pytest.approx(3.394, abs=2e-3)
        assert m.measured_type == "area"

    def test_tc007_missing_value_returns_none(self) -> None:
        assert user_measurement(None, "diameter", 1.65) is None
        assert user_measurement(3.5, None, 1.65) is None

    def test_tc008_non_positive_value_returns_none(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            assert user_measurement(0.0, "diameter", 1.65) is None
            assert user_measurement(-1.0, "area", 1.65) is None
        assert "non-positive" in caplog.text


class TestComparison:
    """Tests for percent deviation and classification strings"""

    def test_tc009_percent_deviation_sign(self) -> None:
        assert percent_deviation(6.0, 5.0) == pytest.approx(20.0)
        assert percent_deviation(4.0, 5.0) == pytest.approx(-20.0)
        assert percent_deviation(5.0, 5.0) == 0.0

    def test_tc010_above(self) -> None:
        c = compare(6.0, 5.0, "female")
        assert c.direction == "above"
        assert c.describe() == "20.0% above female upper limit"

    def test_tc011_below(self) -> None:
        c = compare(4.0, 5.0, "male")
        assert c.direction == "below"
        assert c.describe() == "20.0% below male upper limit"

    def test_tc012_at_limit(self) -> None:
        c = compare(5.0, 5.0, "female")
        assert c.direction == "at"
        assert c.describe() == "At female upper limit"

    def test_tc013_compare_to_sexes(self) -> None:
        normative = calculate_normative_values(55, 1.65)
        m = user_measurement(3.5, "diameter", 1.65)
        comparisons = compare_to_sexes(m, normative)
        # 5.831 cm²/m is above the female (5.4785) and below the male (5.94) limit
        assert comparisons[Sex.FEMALE].direction == "above"
        assert comparisons[Sex.MALE].direction == "below"
        assert comparisons[Sex.FEMALE].describe().endswith("above female upper limit")
        assert comparisons[Sex.MALE].describe().endswith("below male upper limit")

    def test_tc014_compare_to_methods(self, female_demographics) -> None:
        results = calculate_all(female_demographics)
        comparisons = compare_to_methods(3.6, results)
        assert [c.target for c in comparisons] == ["JACC", "NORRE", "ASE"]
        # 3.6 cm: above JACC (3.39) and NORRE (3.48), below ASE (3.78)
        assert [c.direction for c in comparisons] == ["above", "above", "below"]

    def test_tc015_compare_to_methods_labels(self, female_demographics) -> None:
        results = calculate_all(female_demographics)
        comparisons = compare_to_methods(3.6, results, {"jacc": "JACC (CMR)"})
        assert comparisons[0].describe().endswith("above JACC (CMR) upper limit")
        assert comparisons[1].target == "NORRE"


def test_tc016_normative_values_match_method_result(female_demographics, male_demographics) -> None:
    """Both-sex values come from the JACC method itself"""
    female = calculate_normative_values(55, 1.65)[Sex.FEMALE]
    male = calculate_normative_values(60, 1.80)[Sex.MALE]
    assert female == jacc.result(female_demographics)
    assert male == jacc.result(male_demographics)
