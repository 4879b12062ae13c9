"""
titanic_eda package

Exploratory analysis of Titanic passenger survival records.

Modules:
 - data_loader.py: read the passenger CSV and enforce the column schema
 - preprocessing.py: impute missing values and derive engineered features
 - eda_analysis.py: overview, missing values and descriptive statistics
 - feature_importance.py: survival rates, value series and correlations
 - insights.py: pick the factor with the largest survival-rate gap
 - pipeline.py: run every stage and collect the results
 - reporting.py: console tables and charts
 - main.py: command line entry point
"""

from titanic_eda.errors import AnalysisError, DegenerateInputWarning, LoadError, SchemaError
from titanic_eda.pipeline import AnalysisResult, load_and_analyze, run_analysis

__version__ = "1.0.0"

__all__ = [
    "AnalysisError",
    "AnalysisResult",
    "DegenerateInputWarning",
    "LoadError",
    "SchemaError",
    "load_and_analyze",
    "run_analysis",
]
