"""
Exploratory Data Analysis (EDA) Module
Purpose: Dataset overview, missing-value report and descriptive statistics
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from typing import List, Optional, Sequence

import pandas as pd

from titanic_eda.config import STATS_FEATURES, TARGET_COLUMN
from titanic_eda.data_loader import require_columns
from titanic_eda.errors import DegenerateInputWarning
from titanic_eda.preprocessing import calculate_median

logger = logging.getLogger(__name__)


@dataclass
class DatasetOverview:
    """Passenger totals and the survival split"""
    total: int
    survived: int
    survival_pct: Optional[float]
    perished_pct: Optional[float]
    features: List[str]

    @property
    def perished(self) -> int:
        return self.total - self.survived


@dataclass
class MissingValueRow:
    feature: str
    missing_count: int
    missing_pct: Optional[float]


@dataclass
class FeatureStats:
    """Mean/median/min/max of one numeric feature; all None when it has no data"""
    feature: str
    mean: Optional[float] = None
    median: Optional[float] = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None

    @property
    def has_data(self) -> bool:
        return self.mean is not None


def is_missing(values: pd.Series) -> pd.Series:
    """Null, NaN and empty-string cells count as missing."""
    blank = values.map(lambda v: isinstance(v, str) and v == "")
    return values.isna() | blank.astype(bool)


class EDAAnalyzer:
    """
    Class to summarise the cleaned passenger dataset
    """

    def __init__(self, stats_features: Sequence[str] = STATS_FEATURES, target_column: str = TARGET_COLUMN):
        self.stats_features = tuple(stats_features)
        self.target_column = target_column

    def basic_data_overview(self, data: pd.DataFrame) -> DatasetOverview:
        """
        Count passengers and survivors

        Percentages are rounded to 2 decimals; perished is 100 minus the
        survival rate. An empty dataset has no percentages.
        """
        require_columns(data, [self.target_column])
        total = len(data)
        survived = int((data[self.target_column] == 1).sum())

        if total == 0:
            warnings.warn("Dataset is empty; survival percentages are undefined", DegenerateInputWarning)
            survival_pct = perished_pct = None
        else:
            rate = survived / total * 100
            survival_pct = round(rate, 2)
            perished_pct = round(100 - rate, 2)

        logger.info("Overview: %d passengers, %d survived", total, survived)
        return DatasetOverview(
            total=total,
            survived=survived,
            survival_pct=survival_pct,
            perished_pct=perished_pct,
            features=[str(col) for col in data.columns],
        )

    def missing_value_report(self, data: pd.DataFrame, features: Optional[Sequence[str]] = None) -> List[MissingValueRow]:
        """
        Missing count and percentage per feature
        Args:
            data (pd.DataFrame): Dataset to check
            features (list): Columns to report (all columns if None)
        Returns:
            list: One MissingValueRow per feature, in the given order
        """
        features = list(data.columns) if features is None else list(features)
        require_columns(data, features)
        total = len(data)

        report = []
        for feature in features:
            count = int(is_missing(data[feature]).sum())
            pct = round(count / total * 100, 2) if total else None
            report.append(MissingValueRow(feature=str(feature), missing_count=count, missing_pct=pct))
        return report

    def numeric_summary(self, data: pd.DataFrame, features: Optional[Sequence[str]] = None) -> List[FeatureStats]:
        """
        Mean, median, min and max per numeric feature

        Missing and non-numeric values are left out of all four numbers. A
        feature with no usable values is reported as having no data.
        """
        features = self.stats_features if features is None else tuple(features)
        require_columns(data, features)

        summary = []
        for feature in features:
            values = pd.to_numeric(data[feature], errors="coerce").dropna()
            if values.empty:
                warnings.warn(f"No numeric values for '{feature}'; statistics unavailable", DegenerateInputWarning)
                summary.append(FeatureStats(feature=feature))
                continue

            summary.append(FeatureStats(
                feature=feature,
                mean=round(float(values.mean()), 2),
                median=round(float(calculate_median(values.tolist())), 2),
                minimum=round(float(values.min()), 2),
                maximum=round(float(values.max()), 2),
            ))
        return summary
