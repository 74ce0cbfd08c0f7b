"""
Pre-computed metrics for the payment default prediction model.

Every table is a literal constant. Loaders hand out a fresh DataFrame on each
call so the constants themselves are never mutated.

Functions:
    load_model_performance - candidate model comparison (AUC, accuracy, precision, recall)
    load_feature_importance - top 10 features, descending importance
    load_default_distribution - Default / No Default split (percent)
    load_payment_status_distribution - clients per payment lateness bucket
    load_roc_curve - ROC sample points for the final model
    load_threshold_impact - precision / recall / F1 per probability cutoff
    optimal_threshold - cutoff with the best F1
    validate_tables - check the invariants every chart relies on
"""

import logging
from typing import Optional

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Literal tables
# ---------------------------------------------------------------------------
MODEL_PERFORMANCE_COLUMNS = ("name", "auc", "accuracy", "precision", "recall")
MODEL_PERFORMANCE = (
    ("Logistic Regression", 0.79, 0.76, 0.69, 0.65),
    ("Random Forest", 0.85, 0.82, 0.78, 0.73),
    ("Gradient Boosting", 0.83, 0.80, 0.76, 0.72),
    ("XGBoost", 0.84, 0.81, 0.77, 0.71),
)

FEATURE_IMPORTANCE_COLUMNS = ("name", "importance")
FEATURE_IMPORTANCE = (
    ("max_delay", 0.26),
    ("avg_delay", 0.18),
    ("payment_trend", 0.14),
    ("avg_paid_ratio", 0.11),
    ("total_delayed", 0.09),
    ("high_credit_risk", 0.07),
    ("payment_volatility", 0.06),
    ("total_on_time", 0.05),
    ("credit_bins_3", 0.03),
    ("gender_1", 0.01),
)

DEFAULT_DISTRIBUTION_COLUMNS = ("name", "value")
DEFAULT_DISTRIBUTION = (
    ("Default", 20),
    ("No Default", 80),
)

PAYMENT_STATUS_COLUMNS = ("status", "count")
PAYMENT_STATUS_DISTRIBUTION = (
    ("On Time (-1)", 62),
    ("1 Month Late (1)", 16),
    ("2 Months Late (2)", 10),
    ("3+ Months Late (3+)", 12),
)

ROC_CURVE_COLUMNS = ("fpr", "tpr")
ROC_CURVE = (
    (0.0, 0.0),
    (0.05, 0.38),
    (0.1, 0.55),
    (0.2, 0.75),
    (0.4, 0.88),
    (0.6, 0.93),
    (0.8, 0.97),
    (1.0, 1.0),
)

THRESHOLD_IMPACT_COLUMNS = ("threshold", "precision", "recall", "f1")
THRESHOLD_IMPACT = (
    (0.1, 0.42, 0.93, 0.58),
    (0.2, 0.52, 0.87, 0.65),
    (0.3, 0.63, 0.80, 0.70),
    (0.4, 0.70, 0.75, 0.72),
    (0.5, 0.78, 0.67, 0.72),
    (0.6, 0.83, 0.52, 0.64),
    (0.7, 0.88, 0.40, 0.55),
    (0.8, 0.92, 0.28, 0.43),
    (0.9, 0.95, 0.14, 0.24),
)

# ---------------------------------------------------------------------------
# Final model and narrative
# ---------------------------------------------------------------------------
FINAL_MODEL_NAME = "Random Forest"

# Percent values shown as progress bars
FINAL_MODEL_METRICS = (
    ("Accuracy", 82),
    ("Precision", 78),
    ("Recall", 73),
    ("F1 Score", 75),
)

PROJECT_SUMMARY = (
    "This visualization presents the results of a payment default prediction "
    "model trained on client payment history data. The model achieved an AUC "
    "of 0.85, with precision of 0.78 and recall of 0.73 using Random Forest.",
    "Our analysis revealed that maximum payment delay and average delay are "
    "the strongest predictors of future defaults. Clients with consistent late "
    "payments showed significantly higher default risk.",
    "The model can be used to identify high-risk clients early, enabling "
    "proactive intervention strategies to reduce default rates. A threshold of "
    "0.4 was found to be optimal for balancing precision and recall.",
)

OPTIMAL_THRESHOLD_NOTE = (
    "At this threshold, the model achieves a good balance between precision "
    "(70%) and recall (75%), maximizing the F1 score at 72%. This threshold is "
    "recommended for production use."
)


# ---------------------------------------------------------------------------
# Loaders
# ---------------------------------------------------------------------------
def _frame(rows: tuple, columns: tuple) -> pd.DataFrame:
    return pd.DataFrame(list(rows), columns=list(columns))


def load_model_performance() -> pd.DataFrame:
    """One row per candidate model."""
    return _frame(MODEL_PERFORMANCE, MODEL_PERFORMANCE_COLUMNS)


def load_feature_importance() -> pd.DataFrame:
    """Top 10 features, already ranked by importance (descending)."""
    return _frame(FEATURE_IMPORTANCE, FEATURE_IMPORTANCE_COLUMNS)


def load_default_distribution() -> pd.DataFrame:
    return _frame(DEFAULT_DISTRIBUTION, DEFAULT_DISTRIBUTION_COLUMNS)


def load_payment_status_distribution() -> pd.DataFrame:
    """Four ordinal lateness buckets, on time first."""
    return _frame(PAYMENT_STATUS_DISTRIBUTION, PAYMENT_STATUS_COLUMNS)


def load_roc_curve() -> pd.DataFrame:
    return _frame(ROC_CURVE, ROC_CURVE_COLUMNS)


def load_threshold_impact() -> pd.DataFrame:
    """Precision, recall and F1 sampled at 0.1 threshold steps."""
    return _frame(THRESHOLD_IMPACT, THRESHOLD_IMPACT_COLUMNS)


def optimal_threshold(df: Optional[pd.DataFrame] = None) -> float:
    """
    Return the threshold with the highest F1 score.

    Ties go to the lowest threshold, which favours recall.

    Parameters
    ----------
    df : pd.DataFrame, optional
        Threshold table with columns 'threshold' and 'f1'. Defaults to
        load_threshold_impact().

    Returns
    -------
    float
    """
    if df is None:
        df = load_threshold_impact()
    required_cols = ["threshold", "f1"]
    missing_cols = [col for col in required_cols if col not in df.columns]
    if missing_cols:
        raise ValueError(f"Missing required columns: {missing_cols}")
    if len(df) == 0:
        raise ValueError("Threshold table is empty")

    ordered = df.sort_values("threshold", kind="stable").reset_index(drop=True)
    best = ordered.loc[ordered["f1"].idxmax()]
    return round(float(best["threshold"]), 2)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------
def _check(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)


def validate_tables() -> None:
    """
    Check the invariants the dashboard relies on.

    Raises
    ------
    ValueError
        Naming the first broken invariant.
    """
    default_dist = load_default_distribution()
    _check(
        len(default_dist) == 2 and int(default_dist["value"].sum()) == 100,
        f"Default distribution must have two slices summing to 100, "
        f"got {default_dist['value'].tolist()}",
    )

    importance = load_feature_importance()["importance"].to_numpy()
    _check(
        bool(np.all(np.diff(importance) <= 0)),
        "Feature importance must be sorted descending",
    )

    roc = load_roc_curve()
    fpr = roc["fpr"].to_numpy()
    tpr = roc["tpr"].to_numpy()
    _check(
        bool(np.all((roc.to_numpy() >= 0) & (roc.to_numpy() <= 1))),
        "ROC points must lie in [0, 1]",
    )
    _check(
        bool(np.all(np.diff(fpr) >= 0) and np.all(np.diff(tpr) >= 0)),
        "ROC curve must be non-decreasing",
    )
    _check(
        (fpr[0], tpr[0]) == (0.0, 0.0) and (fpr[-1], tpr[-1]) == (1.0, 1.0),
        "ROC curve must run from (0, 0) to (1, 1)",
    )

    thresholds = load_threshold_impact()["threshold"].to_numpy()
    _check(
        len(thresholds) == 9
        and bool(np.allclose(thresholds, np.arange(1, 10) / 10)),
        f"Thresholds must step 0.1 to 0.9 by 0.1, got {thresholds.tolist()}",
    )

    metric_frames = {
        "model performance": load_model_performance().drop(columns="name"),
        "threshold impact": load_threshold_impact(),
    }
    for label, frame in metric_frames.items():
        values = frame.to_numpy(dtype=float)
        _check(
            bool(np.all((values >= 0) & (values <= 1))),
            f"All {label} metrics must lie in [0, 1]",
        )

    logger.debug("Static metric tables passed validation")
