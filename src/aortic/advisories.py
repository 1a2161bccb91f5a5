"""
Non-blocking range advisories.

The reference populations cover adults aged roughly 40-70 years and heights of
140-210 cm. Inputs outside these ranges still produce results, but an advisory
is returned and logged.
"""

import logging
from typing import List, Optional

from aortic.config import DEFAULT_CONFIG, PlausibleRange, ReferenceConfig
from aortic.models import Advisory, Demographics


def check_age(
    age: float, bounds: PlausibleRange = DEFAULT_CONFIG.age_range
) -> Optional[Advisory]:
    """Return an advisory when ``age`` is outside ``bounds``."""
    if bounds.contains(age):
        return None
    message = (
        f"Age {age:g} years is outside the reference range "
        f"({bounds.min:g}-{bounds.max:g} years); results may be less reliable."
    )
    logging.warning(message)
    return Advisory(field="age", value=age, message=message)


def check_height(
    height_cm: float, bounds: PlausibleRange = DEFAULT_CONFIG.height_range
) -> Optional[Advisory]:
    """Return an advisory when ``height_cm`` is outside ``bounds``."""
    if bounds.contains(height_cm):
        return None
    message = (
        f"Height {height_cm:.1f} cm is outside the reference range "
        f"({bounds.min:g}-{bounds.max:g} cm); results may be less reliable."
    )
    logging.warning(message)
    return Advisory(field="height_cm", value=height_cm, message=message)


def collect_advisories(
    demographics: Demographics, config: ReferenceConfig = DEFAULT_CONFIG
) -> List[Advisory]:
    """Advisories for every out-of-range input, in field order."""
    checks = [
        check_age(demographics.age, config.age_range),
        check_height(demographics.height_cm, config.height_range),
    ]
    return [a for a in checks if a is not None]
