"""
Reporting Module
Purpose: Print the analysis tables and draw the survival charts

Charts are saved as PNG files when an output directory is given and shown
on screen when requested. Every chart is skipped, not failed, when there is
nothing to draw.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

from titanic_eda.config import PORT_NAMES, VALID_CLASSES, VALID_PORTS
from titanic_eda.insights import class_label

logger = logging.getLogger(__name__)

SURVIVED_COLOR = "#4bc0c0"
PERISHED_COLOR = "#ff6384"
NO_DATA = "no data"


# Chart data

def class_survival_counts(data: pd.DataFrame) -> pd.DataFrame:
    """Survivor and victim counts for 1st, 2nd and 3rd class (zero rows included)."""
    counts = pd.DataFrame(0, index=list(VALID_CLASSES), columns=["Survived", "Perished"])
    for pclass in VALID_CLASSES:
        group = data.loc[data["Pclass"] == pclass, "Survived"]
        counts.loc[pclass, "Survived"] = int((group == 1).sum())
        counts.loc[pclass, "Perished"] = int((group == 0).sum())
    return counts


def gender_survival_counts(data: pd.DataFrame) -> Dict[str, int]:
    counts = {}
    for sex in ("female", "male"):
        group = data.loc[data["Sex"] == sex, "Survived"]
        counts[f"{sex.title()} Survived"] = int((group == 1).sum())
        counts[f"{sex.title()} Perished"] = int((group == 0).sum())
    return counts


def age_histogram(data: pd.DataFrame, bins: int = 10) -> Optional[Tuple[List[str], np.ndarray, np.ndarray]]:
    """
    Age counts per equal-width bin for survivors and victims

    Both groups share bin edges spanning the overall age range, so the bars
    line up. Returns None when no ages are recorded.
    """
    ages = pd.to_numeric(data["Age"], errors="coerce")
    present = ages.notna()
    if not present.any():
        return None

    low, high = float(ages[present].min()), float(ages[present].max())
    edges = np.linspace(low, high, bins + 1) if high > low else np.linspace(low - 0.5, high + 0.5, bins + 1)
    survived = np.histogram(ages[present & (data["Survived"] == 1)], bins=edges)[0]
    perished = np.histogram(ages[present & (data["Survived"] == 0)], bins=edges)[0]
    labels = [f"{edges[i]:.1f}-{edges[i + 1]:.1f}" for i in range(bins)]
    return labels, survived, perished


def embarked_survival_rates(data: pd.DataFrame) -> Dict[str, float]:
    """Survival rate (%) per port of embarkation; 0 for a port nobody boarded at."""
    rates = {}
    for port in VALID_PORTS:
        group = data.loc[data["Embarked"] == port, "Survived"]
        rates[port] = round(float((group == 1).sum()) / len(group) * 100, 2) if len(group) else 0.0
    return rates


def _fmt(value, digits: int = 2, missing: str = NO_DATA) -> str:
    return missing if value is None else f"{value:.{digits}f}"


def _pct(value) -> str:
    return NO_DATA if value is None else f"{value:.2f}%"


class SurvivalReport:
    """
    Class to present an AnalysisResult as console tables and charts
    """

    def __init__(self, output_dir=None, show=False, figsize=(10, 6)):
        """
        Initialize the report with basic matplotlib settings
        Args:
            output_dir (str | Path | None): Where PNG charts are written (not saved if None)
            show (bool): Display each chart on screen
            figsize (tuple): Default figure size
        """
        self.output_dir = Path(output_dir) if output_dir is not None else None
        self.show = show
        self.figsize = figsize
        sns.set_theme(style="whitegrid")
        plt.rcParams['figure.figsize'] = figsize
        plt.rcParams['font.size'] = 10

    # Console tables

    def print_overview(self, overview):
        print("=" * 60)
        print("DATASET OVERVIEW")
        print("=" * 60)
        print(f"Total Passengers: {overview.total}")
        print(f"Survived: {overview.survived} ({_pct(overview.survival_pct)})")
        print(f"Perished: {overview.perished} ({_pct(overview.perished_pct)})")
        print(f"Features: {', '.join(overview.features)}")

    def print_missing_values(self, rows):
        print("\n=== MISSING VALUES ===")
        table = pd.DataFrame({
            'Feature': [row.feature for row in rows],
            'Missing Values': [row.missing_count for row in rows],
            'Percentage': [_pct(row.missing_pct) for row in rows],
        })
        print(table.to_string(index=False) if len(table) else "No features to report.")

    def print_stats_summary(self, stats):
        print("\n=== STATISTICAL SUMMARY ===")
        table = pd.DataFrame({
            'Feature': [s.feature for s in stats],
            'Mean': [_fmt(s.mean) for s in stats],
            'Median': [_fmt(s.median) for s in stats],
            'Min': [_fmt(s.minimum) for s in stats],
            'Max': [_fmt(s.maximum) for s in stats],
        })
        print(table.to_string(index=False) if len(table) else "No numeric features to report.")

    def print_categorical_rates(self, categorical):
        print("\n=== SURVIVAL RATE BY CATEGORY ===")
        for feature, rates in categorical.items():
            print(f"\n--- {feature} ---")
            if not rates:
                print("  (no passengers)")
                continue
            for category, entry in rates.items():
                label = "missing" if category is None else category
                print(f"  {label}: {entry.rate:.2f}% survived (n={entry.total})")

    def print_correlations(self, correlations):
        print("\n=== CORRELATION WITH SURVIVAL ===")
        for feature, r in correlations.items():
            print(f"  {feature}: {_fmt(r, 3, missing='n/a')}")

    def print_key_finding(self, finding):
        print("\n=== KEY FINDING ===")
        if finding is None:
            print("No single factor stood out: neither gender nor passenger class "
                  "showed a difference in survival rates.")
        else:
            print(finding.describe())

    # Charts

    def _finish(self, fig, filename) -> Optional[Path]:
        path = None
        fig.tight_layout()
        if self.output_dir is not None:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            path = self.output_dir / filename
            fig.savefig(path)
            logger.info("Saved chart %s", path)
        if self.show:
            plt.show()
        plt.close(fig)
        return path

    def _bar_chart(self, values: Dict[str, Optional[float]], title, ylabel, filename, color):
        values = {k: v for k, v in values.items() if v is not None}
        if not values:
            logger.info("Skipping '%s': no data", title)
            return None
        fig, ax = plt.subplots(figsize=self.figsize)
        sns.barplot(x=list(values.keys()), y=list(values.values()), color=color, ax=ax)
        ax.set_title(title)
        ax.set_ylabel(ylabel)
        ax.set_ylim(bottom=0)
        return self._finish(fig, filename)

    def plot_categorical_impact(self, importance):
        """Survival-rate range per categorical feature."""
        return self._bar_chart(
            importance.rate_spreads(),
            'Impact of Categorical Features on Survival',
            'Survival Rate Range (%)', 'categorical_impact.png', '#36a2eb',
        )

    def plot_numeric_impact(self, importance):
        """Gap between the survivors' mean and the overall mean per numeric feature."""
        return self._bar_chart(
            importance.mean_differences(),
            'Impact of Numeric Features on Survival',
            'Difference from Mean', 'numeric_impact.png', PERISHED_COLOR,
        )

    def plot_correlations(self, correlations):
        values = {k: v for k, v in correlations.items() if v is not None}
        if not values:
            logger.info("Skipping correlation chart: no data")
            return None
        fig, ax = plt.subplots(figsize=self.figsize)
        colors = [SURVIVED_COLOR if r > 0 else PERISHED_COLOR for r in values.values()]
        ax.bar(list(values.keys()), list(values.values()), color=colors)
        ax.axhline(0, color='black', linewidth=0.8)
        ax.set_ylim(-1, 1)
        ax.set_ylabel('Correlation Coefficient')
        ax.set_title('Correlation Between Numeric Features and Survival')
        return self._finish(fig, 'correlations.png')

    def plot_class_survival(self, data):
        counts = class_survival_counts(data)
        if counts.to_numpy().sum() == 0:
            return None
        long = counts.rename(index=lambda c: f"{class_label(c)} Class").reset_index(names='Class')
        long = long.melt(id_vars='Class', var_name='Outcome', value_name='Passengers')
        fig, ax = plt.subplots(figsize=self.figsize)
        sns.barplot(
            data=long, x='Class', y='Passengers', hue='Outcome',
            palette={'Survived': SURVIVED_COLOR, 'Perished': PERISHED_COLOR}, ax=ax,
        )
        ax.set_ylabel('Passenger Count')
        ax.set_title('Survival by Passenger Class')
        return self._finish(fig, 'class_survival.png')

    def plot_gender_survival(self, data):
        counts = gender_survival_counts(data)
        if sum(counts.values()) == 0:
            return None
        fig, ax = plt.subplots(figsize=self.figsize)
        ax.pie(
            list(counts.values()), labels=list(counts.keys()),
            colors=[SURVIVED_COLOR, PERISHED_COLOR, '#36a2eb', '#ff9f40'],
            wedgeprops={'width': 0.45}, autopct=lambda p: f"{p:.1f}%" if p > 0 else "",
        )
        ax.set_title('Survival by Gender')
        return self._finish(fig, 'gender_survival.png')

    def plot_age_distribution(self, data, bins=10):
        histogram = age_histogram(data, bins)
        if histogram is None:
            return None
        labels, survived, perished = histogram
        x = np.arange(len(labels))
        fig, ax = plt.subplots(figsize=self.figsize)
        ax.bar(x, survived, color=SURVIVED_COLOR, alpha=0.6, label='Survived')
        ax.bar(x, perished, color=PERISHED_COLOR, alpha=0.6, label='Perished')
        ax.set_xticks(x)
        ax.set_xticklabels(labels, rotation=45)
        ax.set_ylabel('Count')
        ax.set_title('Age Distribution by Survival')
        ax.legend()
        return self._finish(fig, 'age_distribution.png')

    def plot_embarked_survival(self, data):
        if len(data) == 0:
            return None
        rates = embarked_survival_rates(data)
        fig, ax = plt.subplots(figsize=self.figsize)
        sns.barplot(x=[PORT_NAMES[p] for p in rates], y=list(rates.values()), color='#9966ff', ax=ax)
        ax.set_ylim(0, 100)
        ax.set_ylabel('Survival Rate (%)')
        ax.set_title('Survival Rate by Embarkation Port')
        return self._finish(fig, 'embarked_survival.png')

    def render(self, result, plots=True) -> List[Path]:
        """
        Print every table and, if `plots`, draw every chart
        Returns:
            list: Paths of the charts written to the output directory
        """
        self.print_overview(result.overview)
        self.print_missing_values(result.missing_values)
        self.print_stats_summary(result.numeric_stats)
        self.print_categorical_rates(result.importance.categorical)
        self.print_correlations(result.importance.correlations)
        self.print_key_finding(result.key_finding)

        if not plots:
            return []
        charts = [
            self.plot_categorical_impact(result.importance),
            self.plot_numeric_impact(result.importance),
            self.plot_correlations(result.importance.correlations),
            self.plot_class_survival(result.data),
            self.plot_gender_survival(result.data),
            self.plot_age_distribution(result.data),
            self.plot_embarked_survival(result.data),
        ]
        return [path for path in charts if path is not None]
