"""
Configuration Module
Purpose: Column schema, feature sets and run settings for the survival analysis
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

TARGET_COLUMN = "Survived"

# Columns the input file must provide
REQUIRED_COLUMNS = ("Survived", "Pclass", "Name", "Sex", "Age", "SibSp", "Parch", "Fare", "Embarked")

INTEGER_COLUMNS = ("Survived", "Pclass", "SibSp", "Parch")
FLOAT_COLUMNS = ("Age", "Fare")
TEXT_COLUMNS = ("Name", "Sex", "Embarked")

# Feature sets used by the analysis stages
CATEGORICAL_FEATURES = ("Pclass", "Sex", "Embarked", "Title", "IsAlone")
NUMERIC_FEATURES = ("Age", "Fare", "FamilySize", "SibSp", "Parch")
CORRELATION_FEATURES = ("Age", "Fare", "SibSp", "Parch", "FamilySize")
STATS_FEATURES = ("Age", "SibSp", "Parch", "Fare", "FamilySize")

COMMON_TITLES = ("Mr", "Miss", "Mrs", "Master")
OTHER_TITLE = "Other"
UNKNOWN_TITLE = "Unknown"

VALID_CLASSES = (1, 2, 3)
VALID_PORTS = ("C", "Q", "S")
DEFAULT_EMBARKED = "S"
PORT_NAMES = {"C": "Cherbourg", "Q": "Queenstown", "S": "Southampton"}

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


@dataclass
class AnalysisConfig:
    """Settings for one analysis run, usually built from command line arguments"""

    data_path: Path = Path("data") / "train.csv"
    output_dir: Optional[Path] = Path("docs") / "plots"
    show_plots: bool = False
    make_plots: bool = True
    log_level: str = "WARNING"
    figsize: Tuple[float, float] = (10, 6)

    def __post_init__(self):
        self.data_path = Path(self.data_path)
        if self.output_dir is not None:
            self.output_dir = Path(self.output_dir)


def configure_logging(level: str = "WARNING") -> None:
    """Set up root logging once for command line runs."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), format=LOG_FORMAT)
