"""
Survival Insights Module
Purpose: Name the factor that separated survivors from victims most clearly
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from titanic_eda.feature_importance import CategoricalSummary, CategoryRate

logger = logging.getLogger(__name__)

GENDER = "Gender"
PASSENGER_CLASS = "Passenger Class"


@dataclass
class KeyFinding:
    """The winning factor, its survival-rate gap and a readable detail line"""
    factor: str
    impact: float
    details: str

    def describe(self) -> str:
        return (
            f"The most important factor contributing to passenger death was {self.factor}.\n"
            f"{self.details}"
        )


def class_label(pclass) -> str:
    """1 -> '1st', 2 -> '2nd', 3 -> '3rd'."""
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(int(pclass), "th")
    return f"{int(pclass)}{suffix}"


def _gender_candidate(sex_rates: Dict[Any, CategoryRate]) -> Optional[KeyFinding]:
    if "male" not in sex_rates or "female" not in sex_rates:
        logger.info("Gender not evaluated: both 'male' and 'female' passengers are needed")
        return None
    female, male = sex_rates["female"].rate, sex_rates["male"].rate
    return KeyFinding(
        factor=GENDER,
        impact=abs(male - female),
        details=f"Female: {female:.2f}%, Male: {male:.2f}%",
    )


def _class_candidate(class_rates: Dict[Any, CategoryRate]) -> Optional[KeyFinding]:
    classes = {pclass: entry for pclass, entry in class_rates.items() if pclass is not None}
    if not classes:
        logger.info("Passenger class not evaluated: no class recorded")
        return None
    best = max(classes, key=lambda c: classes[c].rate)
    worst = min(classes, key=lambda c: classes[c].rate)
    return KeyFinding(
        factor=PASSENGER_CLASS,
        impact=classes[best].rate - classes[worst].rate,
        details=(
            f"{class_label(best)} class: {classes[best].rate:.2f}%, "
            f"{class_label(worst)} class: {classes[worst].rate:.2f}%"
        ),
    )


def determine_most_important_factor(categorical: CategoricalSummary) -> Optional[KeyFinding]:
    """
    Compare gender and passenger class by the gap between their survival rates

    Candidates are checked in a fixed order (gender, then class) and a later
    one only wins with a strictly larger gap, so gender takes ties. Returns
    None when no candidate has a gap above zero.
    """
    max_impact = 0.0
    finding = None

    for candidate in (
        _gender_candidate(categorical.get("Sex", {})),
        _class_candidate(categorical.get("Pclass", {})),
    ):
        if candidate is not None and candidate.impact > max_impact:
            max_impact = candidate.impact
            finding = candidate

    if finding is None:
        logger.info("No factor shows a survival-rate gap above zero")
    else:
        logger.info("Most important factor: %s (gap %.2f points)", finding.factor, finding.impact)
    return finding
