"""
Error types raised while loading and analysing the passenger data.

LoadError and SchemaError stop the run. DegenerateInputWarning is issued
through the warnings module and the affected value is reported as missing.
"""


class AnalysisError(Exception):
    """Base class for fatal analysis failures"""


class LoadError(AnalysisError):
    """The input file is missing, unreadable or malformed"""


class SchemaError(AnalysisError):
    """A required column or field is absent or has an invalid value"""


class DegenerateInputWarning(UserWarning):
    """A statistic could not be computed (no data or zero variance)"""
