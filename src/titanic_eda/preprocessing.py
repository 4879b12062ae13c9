"""
Data Preprocessing Module
Purpose: Impute missing passenger values and derive the engineered features
"""

from __future__ import annotations

import logging
from typing import Iterable

import pandas as pd

from titanic_eda.config import (
    COMMON_TITLES,
    DEFAULT_EMBARKED,
    OTHER_TITLE,
    REQUIRED_COLUMNS,
    UNKNOWN_TITLE,
    VALID_PORTS,
)
from titanic_eda.data_loader import require_columns
from titanic_eda.errors import SchemaError

logger = logging.getLogger(__name__)


def calculate_median(values: Iterable[float]) -> float:
    """
    Median of `values`, or 0 when there are none.

    The input is not modified; values are sorted into a new list first.
    """
    ordered = sorted(values)
    n = len(ordered)
    if n == 0:
        return 0
    half = n // 2
    if n % 2 == 0:
        return (ordered[half - 1] + ordered[half]) / 2
    return ordered[half]


def extract_title(name: str) -> str:
    """Take the honorific from a "Surname, Title. Given names" passenger name."""
    parts = name.split(", ")
    if len(parts) < 2:
        return UNKNOWN_TITLE
    return parts[1].split(". ")[0]


def normalize_title(title: str, common_titles=COMMON_TITLES) -> str:
    return title if title in common_titles else OTHER_TITLE


class DataPreprocessor:
    """Class to handle data preprocessing tasks"""

    def __init__(self, default_embarked=DEFAULT_EMBARKED, common_titles=COMMON_TITLES):
        """
        Initialize DataPreprocessor
        Args:
            default_embarked (str): Port code used when Embarked is missing
            common_titles (tuple): Titles kept as-is; every other title becomes 'Other'
        """
        self.default_embarked = default_embarked
        self.common_titles = tuple(common_titles)

    def preprocess(self, data):
        """
        Run every preprocessing step on the dataset, in place

        Running it again on an already processed dataset changes nothing:
        ages are no longer missing and the derived columns are rebuilt from
        the same source fields.

        Args:
            data (pd.DataFrame): Passenger records with the required columns
        Returns:
            pd.DataFrame: The same frame, cleaned and with Title/FamilySize/IsAlone added
        Raises:
            SchemaError: a required column is absent or a record has no Name
        """
        require_columns(data, REQUIRED_COLUMNS)
        nameless = data["Name"].isna()
        if nameless.any():
            raise SchemaError(f"{int(nameless.sum())} record(s) have no Name; cannot derive Title")

        self.impute_age(data)
        self.fill_embarked(data)
        self.add_title(data)
        self.add_family_features(data)
        return data

    def impute_age(self, data):
        """
        Replace missing or non-numeric ages with the median age

        The median is taken once from the ages present before any record is
        filled, so imputed values never feed back into it.
        """
        ages = pd.to_numeric(data["Age"], errors="coerce").astype(float)
        missing = ages.isna()
        median_age = calculate_median(ages[~missing].tolist())
        data["Age"] = ages.fillna(median_age)

        if missing.any():
            logger.info("Age: filled %d missing value(s) with median %.2f", int(missing.sum()), median_age)
        return median_age

    def fill_embarked(self, data):
        """Fill missing embarkation ports and map unknown port codes to the default."""
        ports = data["Embarked"].astype("string").str.strip().str.upper()
        missing = ports.isna() | (ports == "").fillna(False)
        unknown = ~missing & ~ports.isin(VALID_PORTS).fillna(False)

        if unknown.any():
            logger.warning(
                "Embarked: %d unknown port code(s) %s replaced with '%s'",
                int(unknown.sum()), sorted(set(ports[unknown])), self.default_embarked,
            )
        ports = ports.mask(missing | unknown, self.default_embarked)
        data["Embarked"] = ports.astype(object)

        if missing.any():
            logger.info("Embarked: filled %d missing value(s) with '%s'", int(missing.sum()), self.default_embarked)

    def add_title(self, data):
        """Derive Title from Name, keeping only the common titles."""
        data["Title"] = [
            normalize_title(extract_title(str(name)), self.common_titles) for name in data["Name"]
        ]

    def add_family_features(self, data):
        """FamilySize counts the passenger plus siblings/spouses and parents/children aboard."""
        for col in ("SibSp", "Parch"):
            if data[col].isna().any():
                raise SchemaError(f"Column '{col}' has missing values; cannot compute FamilySize")
        data["FamilySize"] = data["SibSp"].astype(int) + data["Parch"].astype(int) + 1
        data["IsAlone"] = (data["FamilySize"] == 1).astype(int)
