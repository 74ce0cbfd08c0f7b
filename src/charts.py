"""
Plotly figures for the payment default dashboard.

Each builder takes one metrics table and returns a figure. Inputs are never
re-sorted or mutated.

Functions:
    default_distribution_pie - Default / No Default share
    payment_status_bar - client counts per payment lateness bucket
    model_auc_bar - AUC per candidate model
    roc_curve_line - ROC curve with chance diagonal
    feature_importance_bar - horizontal importance bars, order as provided
    threshold_impact_line - precision / recall / F1 across thresholds
"""

from typing import Optional

import pandas as pd
import plotly.graph_objects as go

from src.config import (
    AUC_AXIS_RANGE,
    BACKGROUND_COLOR,
    CARD_CHART_HEIGHT,
    COLORS,
    FONT_COLOR,
    GRID_COLOR,
    METRIC_COLORS,
    PRIMARY_COLOR,
    REFERENCE_LINE_COLOR,
    WIDE_CHART_HEIGHT,
)


def _require(df: pd.DataFrame, required_cols: list) -> None:
    missing_cols = [col for col in required_cols if col not in df.columns]
    if missing_cols:
        raise ValueError(f"Missing required columns: {missing_cols}")


def _apply_layout(fig: go.Figure, title: str, height: int) -> go.Figure:
    fig.update_layout(
        title=title,
        paper_bgcolor=BACKGROUND_COLOR,
        plot_bgcolor=BACKGROUND_COLOR,
        font=dict(color=FONT_COLOR),
        height=height,
        margin=dict(l=20, r=20, t=60, b=20),
        legend=dict(
            orientation="h", yanchor="bottom", y=1.02,
            xanchor="center", x=0.5,
        ),
    )
    fig.update_xaxes(gridcolor=GRID_COLOR)
    fig.update_yaxes(gridcolor=GRID_COLOR)
    return fig


def default_distribution_pie(df: pd.DataFrame) -> go.Figure:
    """Pie of the Default / No Default split with label and percent text."""
    _require(df, ["name", "value"])
    colors = [COLORS[i % len(COLORS)] for i in range(len(df))]
    fig = go.Figure(go.Pie(
        labels=df["name"].tolist(),
        values=df["value"].tolist(),
        texttemplate="%{label}: %{percent:.0%}",
        marker=dict(colors=colors),
        sort=False,
        hovertemplate="%{label}: %{value}<extra></extra>",
    ))
    fig.update_layout(showlegend=False)
    return _apply_layout(fig, "Default Distribution", CARD_CHART_HEIGHT)


def payment_status_bar(df: pd.DataFrame) -> go.Figure:
    _require(df, ["status", "count"])
    fig = go.Figure(go.Bar(
        x=df["status"].tolist(),
        y=df["count"].tolist(),
        name="Clients",
        marker_color=PRIMARY_COLOR,
        hovertemplate="%{x}<br>Count: %{y}<extra></extra>",
    ))
    fig.update_layout(
        xaxis=dict(title="Payment Status"),
        yaxis=dict(title="Count"),
    )
    return _apply_layout(fig, "Payment Status Distribution", CARD_CHART_HEIGHT)


def model_auc_bar(df: pd.DataFrame) -> go.Figure:
    """AUC per candidate model on a narrowed y axis so differences show."""
    _require(df, ["name", "auc"])
    fig = go.Figure(go.Bar(
        x=df["name"].tolist(),
        y=df["auc"].tolist(),
        name="AUC Score",
        marker_color=PRIMARY_COLOR,
        showlegend=True,
        hovertemplate="%{x}<br>AUC: %{y:.2f}<extra></extra>",
    ))
    fig.update_layout(yaxis=dict(title="AUC", range=AUC_AXIS_RANGE))
    return _apply_layout(fig, "Model Comparison (AUC)", CARD_CHART_HEIGHT)


def roc_curve_line(df: pd.DataFrame, model_name: str) -> go.Figure:
    """
    ROC curve for one model plus the dashed chance diagonal.

    Parameters
    ----------
    df : pd.DataFrame
        Columns 'fpr' and 'tpr', ordered by fpr.
    model_name : str
        Shown in the title.

    Returns
    -------
    go.Figure - first trace is the curve, second the diagonal
    """
    _require(df, ["fpr", "tpr"])
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=df["fpr"].tolist(),
        y=df["tpr"].tolist(),
        name="tpr",
        mode="lines",
        line=dict(color=PRIMARY_COLOR, width=2),
        hovertemplate="FPR: %{x:.2f}<br>TPR: %{y:.2f}<extra></extra>",
    ))
    fig.add_trace(go.Scatter(
        x=df["fpr"].tolist(),
        y=df["fpr"].tolist(),
        name="fpr",
        mode="lines",
        line=dict(color=REFERENCE_LINE_COLOR, width=1, dash="dash"),
        hoverinfo="skip",
    ))
    fig.update_layout(
        showlegend=False,
        xaxis=dict(title="False Positive Rate", range=[0, 1]),
        yaxis=dict(title="True Positive Rate", range=[0, 1.02]),
    )
    return _apply_layout(fig, f"ROC Curve ({model_name})", CARD_CHART_HEIGHT)


def feature_importance_bar(df: pd.DataFrame) -> go.Figure:
    """
    Horizontal importance bars, first row drawn at the top.

    The category axis is reversed for display only; the trace keeps the rows
    in the order given.
    """
    _require(df, ["name", "importance"])
    fig = go.Figure(go.Bar(
        x=df["importance"].tolist(),
        y=df["name"].tolist(),
        orientation="h",
        name="importance",
        marker_color=PRIMARY_COLOR,
        hovertemplate="%{y}: %{x:.2f}<extra></extra>",
    ))
    fig.update_layout(
        xaxis=dict(title="Importance"),
        yaxis=dict(type="category", autorange="reversed"),
    )
    fig = _apply_layout(fig, "Top 10 Feature Importance", WIDE_CHART_HEIGHT)
    fig.update_layout(margin=dict(l=150))
    return fig


def threshold_impact_line(df: pd.DataFrame,
                          optimal: Optional[float] = None) -> go.Figure:
    """
    Precision, recall and F1 against the classification threshold.

    Parameters
    ----------
    df : pd.DataFrame
        Columns 'threshold', 'precision', 'recall', 'f1'.
    optimal : float, optional
        Threshold to mark with a dotted vertical line.

    Returns
    -------
    go.Figure - one trace per metric, in precision, recall, f1 order
    """
    metrics = ["precision", "recall", "f1"]
    _require(df, ["threshold"] + metrics)
    fig = go.Figure()
    for metric in metrics:
        fig.add_trace(go.Scatter(
            x=df["threshold"].tolist(),
            y=df[metric].tolist(),
            name=metric,
            mode="lines+markers",
            line=dict(color=METRIC_COLORS[metric], width=2),
            hovertemplate=(
                f"<b>{metric}</b><br>"
                "Threshold: %{x:.1f}<br>"
                "Value: %{y:.2f}"
                "<extra></extra>"
            ),
        ))
    if optimal is not None:
        fig.add_vline(
            x=optimal,
            line=dict(color=FONT_COLOR, width=1, dash="dot"),
            annotation_text=f"Optimal {optimal:.1f}",
            annotation_position="top",
        )
    fig.update_layout(
        xaxis=dict(title="Threshold", dtick=0.1),
        yaxis=dict(title="Score", range=[0, 1]),
    )
    return _apply_layout(fig, "Threshold Impact on Model Metrics", WIDE_CHART_HEIGHT)
