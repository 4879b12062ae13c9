"""
Analysis Pipeline
Purpose: Run preprocessing, summaries, feature importance and the key finding in order
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

import pandas as pd

from titanic_eda.data_loader import DataLoader, coerce_schema
from titanic_eda.eda_analysis import DatasetOverview, EDAAnalyzer, FeatureStats, MissingValueRow
from titanic_eda.feature_importance import FeatureImportance, FeatureImportanceAnalyzer
from titanic_eda.insights import KeyFinding, determine_most_important_factor
from titanic_eda.preprocessing import DataPreprocessor

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    """Everything one analysis run produces, handed to the report"""
    data: pd.DataFrame
    overview: DatasetOverview
    missing_values: List[MissingValueRow]
    numeric_stats: List[FeatureStats]
    importance: FeatureImportance
    key_finding: Optional[KeyFinding]


def run_analysis(
    data: pd.DataFrame,
    preprocessor: Optional[DataPreprocessor] = None,
    eda: Optional[EDAAnalyzer] = None,
    importance_analyzer: Optional[FeatureImportanceAnalyzer] = None,
) -> AnalysisResult:
    """
    Analyse a passenger dataset

    The frame is typed and preprocessed in place, then only read.
    Args:
        data (pd.DataFrame): Passenger records with the required columns
    Returns:
        AnalysisResult: Summaries, feature importance and the key finding
    Raises:
        SchemaError: a required column or field is absent or invalid
    """
    preprocessor = preprocessor or DataPreprocessor()
    eda = eda or EDAAnalyzer()
    importance_analyzer = importance_analyzer or FeatureImportanceAnalyzer()

    logger.info("Preprocessing %d records", len(data))
    coerce_schema(data)
    preprocessor.preprocess(data)

    overview = eda.basic_data_overview(data)
    missing_values = eda.missing_value_report(data)
    numeric_stats = eda.numeric_summary(data)

    importance = importance_analyzer.analyze(data)
    key_finding = determine_most_important_factor(importance.categorical)

    return AnalysisResult(
        data=data,
        overview=overview,
        missing_values=missing_values,
        numeric_stats=numeric_stats,
        importance=importance,
        key_finding=key_finding,
    )


def load_and_analyze(file_path, loader: Optional[DataLoader] = None) -> AnalysisResult:
    """Load a delimited passenger file and analyse it; LoadError stops before preprocessing."""
    loader = loader or DataLoader()
    data = loader.load_file(file_path)
    return run_analysis(data)
