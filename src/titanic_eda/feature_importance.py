"""
Feature Importance Module
Purpose: Relate each passenger feature to survival

- categorical features: survival rate and passenger count per category
- numeric features: value series for survivors and for everyone
- numeric features: Pearson correlation with the survival flag
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

import numpy as np
import pandas as pd
from scipy import stats

from titanic_eda.config import (
    CATEGORICAL_FEATURES,
    CORRELATION_FEATURES,
    NUMERIC_FEATURES,
    TARGET_COLUMN,
)
from titanic_eda.data_loader import require_columns
from titanic_eda.errors import DegenerateInputWarning

logger = logging.getLogger(__name__)


@dataclass
class CategoryRate:
    rate: float
    total: int


@dataclass
class NumericSeries:
    """Feature values of survivors and of all passengers, in dataset order"""
    survived_values: List[Any] = field(default_factory=list)
    all_values: List[Any] = field(default_factory=list)


CategoricalSummary = Dict[str, Dict[Any, CategoryRate]]
NumericSummary = Dict[str, NumericSeries]


@dataclass
class FeatureImportance:
    categorical: CategoricalSummary
    numeric: NumericSummary
    correlations: Dict[str, Optional[float]]

    def rate_spreads(self) -> Dict[str, Optional[float]]:
        return {feature: rate_spread(rates) for feature, rates in self.categorical.items()}

    def mean_differences(self) -> Dict[str, Optional[float]]:
        return {feature: mean_difference(series) for feature, series in self.numeric.items()}


def _plain(value):
    """numpy scalars become Python values; a missing value becomes None."""
    if value is None or (isinstance(value, float) and np.isnan(value)) or value is pd.NA:
        return None
    if isinstance(value, np.generic):
        return value.item()
    return value


def pearson_correlation(x, y, label: str = "correlation") -> Optional[float]:
    """
    Pearson correlation of two equally long sequences

    Pairs where either value is missing are skipped. Returns 0 when either
    side has zero variance, exactly 1 for identical sequences, and None when
    no complete pairs remain.
    """
    x = pd.to_numeric(pd.Series(list(x)), errors="coerce").to_numpy(dtype=float)
    y = pd.to_numeric(pd.Series(list(y)), errors="coerce").to_numpy(dtype=float)
    if len(x) != len(y):
        raise ValueError(f"Sequences differ in length: {len(x)} != {len(y)}")

    complete = ~(np.isnan(x) | np.isnan(y))
    x, y = x[complete], y[complete]
    if len(x) == 0:
        warnings.warn(f"{label}: no complete value pairs, correlation undefined", DegenerateInputWarning)
        return None

    # a constant side has a zero sum of squares
    if np.all(x == x[0]) or np.all(y == y[0]):
        warnings.warn(f"{label}: zero variance, correlation reported as 0", DegenerateInputWarning)
        return 0.0

    # identical inputs are exactly 1, without floating-point drift
    if np.array_equal(x, y):
        return 1.0

    r, _ = stats.pearsonr(x, y)
    return float(r)


def rate_spread(rates: Mapping[Any, CategoryRate]) -> Optional[float]:
    """Highest minus lowest survival rate across a feature's categories."""
    if not rates:
        return None
    values = [entry.rate for entry in rates.values()]
    return max(values) - min(values)


def mean_difference(series: NumericSeries) -> Optional[float]:
    """How far the survivors' mean sits from the overall mean (absolute)."""
    survived = pd.to_numeric(pd.Series(series.survived_values, dtype=object), errors="coerce").dropna()
    everyone = pd.to_numeric(pd.Series(series.all_values, dtype=object), errors="coerce").dropna()
    if survived.empty or everyone.empty:
        return None
    return abs(float(survived.mean()) - float(everyone.mean()))


class FeatureImportanceAnalyzer:
    """
    Class to measure how strongly each feature is associated with survival
    """

    def __init__(
        self,
        categorical_features: Sequence[str] = CATEGORICAL_FEATURES,
        numeric_features: Sequence[str] = NUMERIC_FEATURES,
        correlation_features: Sequence[str] = CORRELATION_FEATURES,
        target_column: str = TARGET_COLUMN,
    ):
        self.categorical_features = tuple(categorical_features)
        self.numeric_features = tuple(numeric_features)
        self.correlation_features = tuple(correlation_features)
        self.target_column = target_column

    def _survived_mask(self, data: pd.DataFrame) -> pd.Series:
        return data[self.target_column] == 1

    def categorical_rates(self, data: pd.DataFrame, features: Optional[Sequence[str]] = None) -> CategoricalSummary:
        """
        Survival rate (%) and passenger count for every category of each feature

        Categories appear in the order they first occur. Missing values are
        grouped under the None key so the counts always add up to len(data).
        """
        features = self.categorical_features if features is None else tuple(features)
        require_columns(data, [self.target_column, *features])
        survived = self._survived_mask(data)

        results: CategoricalSummary = {}
        for feature in features:
            column = data[feature]
            rates: Dict[Any, CategoryRate] = {}
            for category in pd.unique(column):
                key = _plain(category)
                mask = column.isna() if key is None else column == category
                total = int(mask.sum())
                rates[key] = CategoryRate(rate=int(survived[mask].sum()) / total * 100, total=total)
            results[feature] = rates
            logger.debug("%s: %d categories", feature, len(rates))
        return results

    def numeric_series(self, data: pd.DataFrame, features: Optional[Sequence[str]] = None) -> NumericSummary:
        """All values of each numeric feature, plus the values of survivors only."""
        features = self.numeric_features if features is None else tuple(features)
        require_columns(data, [self.target_column, *features])
        survived = self._survived_mask(data)

        return {
            feature: NumericSeries(
                survived_values=[_plain(v) for v in data.loc[survived, feature]],
                all_values=[_plain(v) for v in data[feature]],
            )
            for feature in features
        }

    def correlations(self, data: pd.DataFrame, features: Optional[Sequence[str]] = None) -> Dict[str, Optional[float]]:
        """Pearson correlation of each numeric feature with the survival flag."""
        features = self.correlation_features if features is None else tuple(features)
        require_columns(data, [self.target_column, *features])

        return {
            feature: pearson_correlation(data[feature], data[self.target_column], label=feature)
            for feature in features
        }

    def analyze(self, data: pd.DataFrame) -> FeatureImportance:
        importance = FeatureImportance(
            categorical=self.categorical_rates(data),
            numeric=self.numeric_series(data),
            correlations=self.correlations(data),
        )
        logger.info(
            "Correlations with survival: %s",
            ", ".join(f"{f}={r:.3f}" if r is not None else f"{f}=n/a" for f, r in importance.correlations.items()),
        )
        return importance
