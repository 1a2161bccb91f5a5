# Tests for the NORRE height-indexed method

import pytest

from aortic.methods import norre
from aortic.models import Sex


def test_tc001_female_at_165() -> None:
    """21.1 mm/m * 1.65 m / 10"""
    assert norre.norre_uln(Sex.FEMALE, 165.0) == pytest.approx(3.4815)


def test_tc002_male_at_170() -> None:
    assert norre.norre_uln(Sex.MALE, 170.0) == pytest.approx(3.638)


def test_tc003_independent_of_age(female_demographics) -> None:
    older = female_demographics.model_copy(update={"age": 80})
    assert norre.result(older).diameter == norre.result(female_demographics).diameter


def test_tc004_result_record(female_demographics) -> None:
    result = norre.result(female_demographics)
    assert result.method == "norre"
    assert result.index == pytest.approx(21.1)
    assert result.diameter == pytest.approx(3.4815)
    assert result.area > 0
