"""
Payment default dashboard: four sub-views behind one tab strip.

  Overview: default split, payment status buckets, project summary
  Model Performance: AUC comparison, ROC curve, final model metrics
  Feature Analysis: top 10 feature importance
  Threshold Optimization: precision / recall / F1 by cutoff
"""

import logging
from typing import MutableMapping, Optional

import pandas as pd
import streamlit as st

from src.charts import (
    default_distribution_pie,
    feature_importance_bar,
    model_auc_bar,
    payment_status_bar,
    roc_curve_line,
    threshold_impact_line,
)
from src.config import PAGE_TITLE
from src.metrics_data import (
    FINAL_MODEL_METRICS,
    FINAL_MODEL_NAME,
    OPTIMAL_THRESHOLD_NOTE,
    PROJECT_SUMMARY,
    load_default_distribution,
    load_feature_importance,
    load_model_performance,
    load_payment_status_distribution,
    load_roc_curve,
    load_threshold_impact,
    optimal_threshold,
)
from src.tab_selector import TabSelector

logger = logging.getLogger(__name__)

DASHBOARD_TAB_KEY = "dashboard_tab"
DASHBOARD_TABS = {
    "overview": "Overview",
    "model": "Model Performance",
    "features": "Feature Analysis",
    "optimization": "Threshold Optimization",
}


def _show_table(df: pd.DataFrame, label: str) -> None:
    with st.expander(label):
        st.dataframe(df, width="stretch", hide_index=True)


# ═══════════════════════════════════════════════════════════════════════════
# Sub-views
# ═══════════════════════════════════════════════════════════════════════════
def render_overview() -> None:
    default_dist = load_default_distribution()
    status_dist = load_payment_status_distribution()

    chart_col1, chart_col2 = st.columns(2)
    with chart_col1:
        st.plotly_chart(default_distribution_pie(default_dist),
                        width="stretch", theme=None)
    with chart_col2:
        st.plotly_chart(payment_status_bar(status_dist),
                        width="stretch", theme=None)

    st.subheader("Project Summary")
    with st.container(border=True):
        for paragraph in PROJECT_SUMMARY:
            st.markdown(paragraph)

    _show_table(default_dist, "View default distribution data")
    _show_table(status_dist, "View payment status data")


def render_model_performance() -> None:
    models = load_model_performance()

    chart_col1, chart_col2 = st.columns(2)
    with chart_col1:
        st.plotly_chart(model_auc_bar(models),
                        width="stretch", theme=None)
    with chart_col2:
        st.plotly_chart(roc_curve_line(load_roc_curve(), FINAL_MODEL_NAME),
                        width="stretch", theme=None)

    st.subheader(f"Final Model Metrics ({FINAL_MODEL_NAME})")
    metric_cols = st.columns(len(FINAL_MODEL_METRICS))
    for col, (label, pct) in zip(metric_cols, FINAL_MODEL_METRICS):
        with col:
            st.markdown(f"**{label}**")
            st.progress(pct)
            st.caption(f"{pct}%")

    # Format for display
    models_display = models.copy()
    for c in ["auc", "accuracy", "precision", "recall"]:
        models_display[c] = models_display[c].apply(lambda x: f"{x:.2f}")
    models_display = models_display.rename(columns={
        "name": "Model",
        "auc": "AUC",
        "accuracy": "Accuracy",
        "precision": "Precision",
        "recall": "Recall",
    })
    _show_table(models_display, "View model comparison data")


def render_feature_analysis() -> None:
    importance = load_feature_importance()
    st.plotly_chart(feature_importance_bar(importance),
                    width="stretch", theme=None)
    _show_table(importance, "View feature importance data")


def render_threshold_optimization() -> None:
    thresholds = load_threshold_impact()
    best = optimal_threshold(thresholds)

    st.plotly_chart(threshold_impact_line(thresholds, optimal=best),
                    width="stretch", theme=None)

    st.markdown(f"**Optimal Threshold: {best:.1f}**")
    st.caption(OPTIMAL_THRESHOLD_NOTE)
    _show_table(thresholds, "View threshold data")


DASHBOARD_PANELS = {
    "overview": render_overview,
    "model": render_model_performance,
    "features": render_feature_analysis,
    "optimization": render_threshold_optimization,
}


def dashboard_selector(state: Optional[MutableMapping] = None) -> TabSelector:
    return TabSelector(DASHBOARD_TAB_KEY, DASHBOARD_TABS, "overview", state=state)


def render_dashboard(state: Optional[MutableMapping] = None) -> str:
    """
    Draw the dashboard title, its tab strip and the active sub-view.

    Parameters
    ----------
    state : MutableMapping, optional
        Session state holding the remembered sub-tab. Defaults to
        st.session_state.

    Returns
    -------
    str - the sub-view that was rendered
    """
    st.header(PAGE_TITLE)
    selector = dashboard_selector(state)
    selector.widget("Dashboard view")
    rendered = selector.render(DASHBOARD_PANELS)
    logger.debug("Rendered dashboard view '%s'", rendered)
    return rendered
