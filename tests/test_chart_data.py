# Tests for chart data generation

import numpy as np
import pytest
from hypothesis import given, settings, strategies as st

from aortic.bsa import dubois_bsa
from aortic.chart_data import (
    USER_MEASUREMENT_KEY,
    calculate_data_points,
    calculate_method_series,
    calculate_value_at_height,
    comparison_chart_data,
    generate_height_range,
    marker_series,
    normative_chart_data,
)
from aortic.config import HeightDomain
from aortic.methods import calculate_all
from aortic.models import Demographics, Sex
from aortic.normative import user_measurement


class TestHeightRange:
    """Tests for generate_height_range"""

    def test_tc001_default_domain(self) -> None:
        heights = generate_height_range()
        assert len(heights) == 15
        assert heights[0] == 140.0
        assert heights[-1] == 210.0
        np.testing.assert_allclose(np.diff(heights), 5.0)

    def test_tc002_non_multiple_domain(self) -> None:
        """Max is excluded when not reachable by whole steps"""
        heights = generate_height_range(HeightDomain(min_cm=140.0, max_cm=212.0, step_cm=5.0))
        assert len(heights) == 15
        assert heights[-1] == 210.0

    @settings(max_examples=100, deadline=None)
    @given(
        min_cm=st.integers(min_value=50, max_value=150),
        span=st.integers(min_value=1, max_value=120),
        step=st.integers(min_value=1, max_value=20),
    )
    def test_tc003_hypothesis_length(self, min_cm: int, span: int, step: int) -> None:
        """Length is floor((max - min) / step) + 1"""
        domain = HeightDomain(
            min_cm=float(min_cm), max_cm=float(min_cm + span), step_cm=float(step)
        )
        assert len(generate_height_range(domain)) == span // step + 1


class TestCurves:
    """Tests for reference curve sampling"""

    def test_tc004_area_curve_matches_formula(self) -> None:
        series = calculate_data_points(55, Sex.FEMALE, "area")
        assert len(series) == 15
        assert series.x[0] == 140.0
        assert series.y[0] == pytest.approx(5.4785 * 1.40)
        assert series.label == "Female (97.5th percentile)"
        assert series.kind == "curve"

    def test_tc005_diameter_curve(self) -> None:
        area = calculate_data_points(55, Sex.MALE, "area")
        diameter = calculate_data_points(55, Sex.MALE, "diameter")
        assert diameter.y[0] == pytest.approx(2 * np.sqrt(area.y[0] / np.pi))

    def test_tc006_value_at_height(self) -> None:
        assert calculate_value_at_height(55, Sex.FEMALE, 165.0, "area") == pytest.approx(9.039525)
        assert calculate_value_at_height(55, Sex.FEMALE, 165.0, "diameter") == pytest.approx(3.394, abs=2e-3)

    def test_tc007_deterministic(self) -> None:
        first = calculate_method_series(55, Sex.FEMALE, 23.9)
        second = calculate_method_series(55, Sex.FEMALE, 23.9)
        assert first == second

    def test_tc008_method_series(self) -> None:
        series = calculate_method_series(55, Sex.FEMALE, 23.875)
        assert list(series) == ["jacc", "norre", "ase"]
        assert all(len(s) == 15 for s in series.values())
        # NORRE at 160 cm: 21.1 * 1.6 / 10
        norre = dict(series["norre"].points)
        assert norre[160.0] == pytest.approx(3.376)

    def test_tc009_bsa_curve_holds_bmi_fixed(self) -> None:
        bmi = 25.0
        series = calculate_method_series(50, Sex.MALE, bmi)
        ase = dict(series["ase"].points)
        expected = 1.9 * dubois_bsa(180.0, bmi * 1.8 ** 2)
        assert ase[180.0] == pytest.approx(expected)

    def test_tc010_no_bmi_omits_bsa_curve(self) -> None:
        series = calculate_method_series(50, Sex.MALE, None)
        assert "ase" not in series

    def test_tc011_to_frame(self) -> None:
        frame = calculate_data_points(55, Sex.FEMALE).to_frame()
        assert list(frame.columns) == ["height_cm", "value"]
        assert len(frame) == 15


class TestAssembledChartData:
    """Tests for the full per-view series lists"""

    def test_tc012_marker_series(self) -> None:
        s = marker_series("k", "Point", 165, 3.0)
        assert s.kind == "marker"
        assert s.points == [(165.0, 3.0)]

    def test_tc013_normative_without_height(self) -> None:
        series = normative_chart_data(55, None)
        assert [s.key for s in series] == ["jacc_F", "jacc_M"]

    def test_tc014_normative_with_measurement(self) -> None:
        m = user_measurement(3.5, "diameter", 1.65)
        series = normative_chart_data(55, 165.0, "diameter", m)
        assert [s.kind for s in series] == ["curve", "curve", "marker", "marker", "marker"]
        user = series[-1]
        assert user.key == USER_MEASUREMENT_KEY
        assert user.points == [(165.0, 3.5)]
        assert series[2].label == "Female limit at your height"

    def test_tc015_normative_area_uses_measured_area(self) -> None:
        m = user_measurement(3.5, "diameter", 1.65)
        series = normative_chart_data(55, 165.0, "area", m)
        assert series[-1].y[0] == pytest.approx(m.area)

    def test_tc016_comparison_chart_data(self, female_demographics) -> None:
        results = calculate_all(female_demographics)
        series = comparison_chart_data(female_demographics, results, 3.6)
        keys = [s.key for s in series]
        assert keys == [
            "jacc", "norre", "ase",
            "jacc_at_height", "norre_at_height", "ase_at_height",
            USER_MEASUREMENT_KEY,
        ]
        assert series[3].label == "Your JACC ULN"
        assert series[4].y[0] == pytest.approx(results["norre"].diameter)

    def test_tc017_comparison_without_weight(self) -> None:
        demographics = Demographics(age=50, sex=Sex.MALE, height_cm=175.0)
        results = calculate_all(demographics)
        series = comparison_chart_data(demographics, results)
        assert [s.key for s in series] == ["jacc", "norre", "jacc_at_height", "norre_at_height"]
