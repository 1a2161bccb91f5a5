import pytest

from aortic.models import Demographics, Sex


@pytest.fixture
def female_demographics() -> Demographics:
    """55-year-old woman, 165 cm, 65 kg."""
    return Demographics(age=55, sex=Sex.FEMALE, height_cm=165.0, weight_kg=65.0)


@pytest.fixture
def male_demographics() -> Demographics:
    """60-year-old man, 180 cm, 82 kg."""
    return Demographics(age=60, sex=Sex.MALE, height_cm=180.0, weight_kg=82.0)
