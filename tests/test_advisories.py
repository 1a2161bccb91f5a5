# Tests for range advisories

import logging

from aortic.advisories import check_age, check_height, collect_advisories
from aortic.config import PlausibleRange
from aortic.models import Demographics, Sex


def test_tc001_age_in_range_no_advisory() -> None:
    assert check_age(55) is None
    assert check_age(40) is None
    assert check_age(70) is None


def test_tc002_age_out_of_range(caplog) -> None:
    with caplog.at_level(logging.WARNING):
        advisory = check_age(35)
    assert advisory is not None
    assert advisory.field == "age"
    assert "outside the reference range" in advisory.message
    assert "outside the reference range" in caplog.text


def test_tc003_height_out_of_range() -> None:
    assert check_height(165.0) is None
    advisory = check_height(215.0)
    assert advisory is not None
    assert advisory.field == "height_cm"
    assert advisory.value == 215.0


def test_tc004_custom_bounds() -> None:
    bounds = PlausibleRange(min=18.0, max=90.0)
    assert check_age(35, bounds) is None


def test_tc005_collect_advisories() -> None:
    demographics = Demographics(age=30, sex=Sex.MALE, height_cm=220.0, weight_kg=100.0)
    advisories = collect_advisories(demographics)
    assert [a.field for a in advisories] == ["age", "height_cm"]


def test_tc006_collect_advisories_empty(female_demographics) -> None:
    assert collect_advisories(female_demographics) == []
