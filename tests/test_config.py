# Tests for reference constant configuration

import pytest

from aortic.config import DEFAULT_CONFIG, HeightDomain, PlausibleRange, SexPair
from aortic.models import Sex


def test_tc001_default_constants() -> None:
    assert DEFAULT_CONFIG.jacc.slope.female == 0.0327
    assert DEFAULT_CONFIG.jacc.intercept.male == 3.74
    assert DEFAULT_CONFIG.norre.for_sex(Sex.MALE) == 21.4
    assert DEFAULT_CONFIG.ase.for_sex(Sex.FEMALE) == 2.2


def test_tc002_default_height_domain() -> None:
    domain = DEFAULT_CONFIG.height_domain
    assert (domain.min_cm, domain.max_cm, domain.step_cm) == (140.0, 210.0, 5.0)


def test_tc003_domain_invalid_min_gt_max() -> None:
    with pytest.raises(ValueError):
        HeightDomain(min_cm=210.0, max_cm=140.0, step_cm=5.0)


def test_tc004_domain_invalid_step() -> None:
    with pytest.raises(ValueError):
        HeightDomain(min_cm=140.0, max_cm=210.0, step_cm=0.0)


def test_tc005_range_invalid_min_gt_max() -> None:
    with pytest.raises(ValueError):
        PlausibleRange(min=70.0, max=40.0)


def test_tc006_non_float_values() -> None:
    with pytest.raises(Exception):  # Pydantic ValidationError
        SexPair(female="2.2", male=1.9)  # type: ignore


def test_tc007_config_is_frozen() -> None:
    with pytest.raises(Exception):
        DEFAULT_CONFIG.norre = SexPair(female=1.0, male=1.0)  # type: ignore
