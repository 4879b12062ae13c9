"""
Data Loader Module
Purpose: Load the passenger survival dataset and enforce its column schema
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Mapping, Sequence

import numpy as np
import pandas as pd

from titanic_eda.config import (
    FLOAT_COLUMNS,
    INTEGER_COLUMNS,
    REQUIRED_COLUMNS,
    TEXT_COLUMNS,
    VALID_CLASSES,
)
from titanic_eda.errors import LoadError, SchemaError

logger = logging.getLogger(__name__)


def require_columns(data: pd.DataFrame, columns: Sequence[str] = REQUIRED_COLUMNS) -> None:
    """Raise SchemaError naming every column of `columns` absent from `data`."""
    missing = [col for col in columns if col not in data.columns]
    if missing:
        raise SchemaError(f"Required column(s) missing from dataset: {', '.join(missing)}")


def _row_numbers(mask: pd.Series, limit: int = 5) -> str:
    rows = [str(i) for i in mask[mask].index[:limit]]
    more = int(mask.sum()) - len(rows)
    return ", ".join(rows) + (f" (+{more} more)" if more > 0 else "")


def coerce_schema(data: pd.DataFrame) -> pd.DataFrame:
    """
    Give every schema column its declared type, in place
    Args:
        data (pd.DataFrame): Raw dataset
    Returns:
        pd.DataFrame: The same frame with typed columns
    Raises:
        SchemaError: a required column is absent, or Survived/Pclass/SibSp/Parch/Name
            is null or out of range, or Fare is negative
    """
    require_columns(data)

    for col in TEXT_COLUMNS:
        text = data[col].astype("string").str.strip()
        if col == "Sex":
            text = text.str.lower()
        text = text.mask((text == "").fillna(False))
        data[col] = text.astype(object).where(text.notna(), np.nan)

    for col in FLOAT_COLUMNS:
        data[col] = pd.to_numeric(data[col], errors="coerce").astype(float)

    # negative ages count as missing and are imputed later
    negative_age = data["Age"] < 0
    if negative_age.any():
        logger.warning("Treating negative Age as missing at row(s) %s", _row_numbers(negative_age))
        data.loc[negative_age, "Age"] = np.nan
    negative_fare = data["Fare"] < 0
    if negative_fare.any():
        raise SchemaError(f"Column 'Fare' has negative values at row(s) {_row_numbers(negative_fare)}")

    for col in INTEGER_COLUMNS:
        values = pd.to_numeric(data[col], errors="coerce").astype(float)
        bad = values.isna() | (values != values.round())
        if col == "Survived":
            bad |= ~values.isin([0, 1])
        elif col == "Pclass":
            bad |= ~values.isin(VALID_CLASSES)
        else:
            bad |= values < 0
        if bad.any():
            raise SchemaError(f"Column '{col}' has missing or invalid values at row(s) {_row_numbers(bad)}")
        data[col] = values.astype(int)

    nameless = data["Name"].isna()
    if nameless.any():
        raise SchemaError(f"Column 'Name' is empty at row(s) {_row_numbers(nameless)}")

    return data


class DataLoader:
    """Class to handle data loading and schema checks"""

    def __init__(self, data_dir="data"):
        """
        Initialize DataLoader
        Args:
            data_dir (str): Path to data directory
        """
        self.data_dir = Path(data_dir)
        self.train_data = None

    def load_train_data(self, filename="train.csv"):
        """
        Load the training dataset from the data directory
        Args:
            filename (str): Name of the training data file
        Returns:
            pd.DataFrame: Loaded training data
        """
        self.train_data = self.load_file(self.data_dir / filename)
        return self.train_data

    def load_file(self, file_path):
        """
        Parse a delimited file into a DataFrame
        Args:
            file_path (str | Path): CSV (comma) or TSV (tab) file
        Returns:
            pd.DataFrame: Parsed data with numeric columns already inferred
        Raises:
            LoadError: file missing, unreadable or malformed
        """
        file_path = Path(file_path)
        if not file_path.is_file():
            raise LoadError(f"File not found: {file_path}")

        sep = "\t" if file_path.suffix.lower() == ".tsv" else ","
        try:
            data = pd.read_csv(file_path, sep=sep, skip_blank_lines=True)
        except pd.errors.EmptyDataError as exc:
            raise LoadError(f"File is empty: {file_path}") from exc
        except pd.errors.ParserError as exc:
            raise LoadError(f"Could not parse {file_path.name}: {exc}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise LoadError(f"Could not read {file_path.name}: {exc}") from exc

        logger.info("Loaded %d records with %d columns from %s", len(data), data.shape[1], file_path)
        return data

    @staticmethod
    def from_records(records: Iterable[Mapping]) -> pd.DataFrame:
        """Build a dataset from mappings of column name to value."""
        data = pd.DataFrame.from_records(list(records))
        logger.debug("Built dataset from %d records", len(data))
        return data
