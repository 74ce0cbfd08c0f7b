"""Tests for src/charts.py"""

import pandas as pd
import plotly.graph_objects as go
import pytest

from src.charts import (
    default_distribution_pie,
    feature_importance_bar,
    model_auc_bar,
    payment_status_bar,
    roc_curve_line,
    threshold_impact_line,
)
from src.config import AUC_AXIS_RANGE
from src.metrics_data import (
    load_default_distribution,
    load_feature_importance,
    load_model_performance,
    load_payment_status_distribution,
    load_roc_curve,
    load_threshold_impact,
)


class TestDefaultDistributionPie:
    """Test the default split pie chart."""

    def test_slices(self):
        fig = default_distribution_pie(load_default_distribution())
        assert isinstance(fig, go.Figure)
        pie = fig.data[0]
        assert list(pie.labels) == ['Default', 'No Default']
        assert sum(pie.values) == 100

    def test_title(self):
        fig = default_distribution_pie(load_default_distribution())
        assert fig.layout.title.text == "Default Distribution"

    def test_missing_column_raises(self):
        with pytest.raises(ValueError, match="Missing required columns"):
            default_distribution_pie(pd.DataFrame({'name': ['Default']}))


class TestPaymentStatusBar:
    """Test the payment status bar chart."""

    def test_bucket_counts(self):
        fig = payment_status_bar(load_payment_status_distribution())
        assert list(fig.data[0].y) == [62, 16, 10, 12]
        assert fig.data[0].x[0] == 'On Time (-1)'


class TestModelAucBar:
    """Test the model AUC comparison chart."""

    def test_one_bar_per_model(self):
        fig = model_auc_bar(load_model_performance())
        bar = fig.data[0]
        assert len(bar.x) == 4
        assert bar.name == "AUC Score"

    def test_axis_window(self):
        fig = model_auc_bar(load_model_performance())
        assert list(fig.layout.yaxis.range) == AUC_AXIS_RANGE


class TestRocCurveLine:
    """Test the ROC curve chart."""

    def test_curve_and_diagonal(self):
        fig = roc_curve_line(load_roc_curve(), "Random Forest")
        assert len(fig.data) == 2
        curve, diagonal = fig.data
        assert list(curve.y) == load_roc_curve()['tpr'].tolist()
        assert list(diagonal.x) == list(diagonal.y)
        assert diagonal.line.dash == "dash"

    def test_title_names_model(self):
        fig = roc_curve_line(load_roc_curve(), "Random Forest")
        assert fig.layout.title.text == "ROC Curve (Random Forest)"
        assert fig.layout.xaxis.title.text == "False Positive Rate"
        assert fig.layout.yaxis.title.text == "True Positive Rate"


class TestFeatureImportanceBar:
    """Test the horizontal feature importance chart."""

    def test_rows_verbatim(self):
        """Ten bars, order as provided, max_delay longest."""
        df = load_feature_importance()
        fig = feature_importance_bar(df)
        bar = fig.data[0]
        assert bar.orientation == 'h'
        assert list(bar.y) == df['name'].tolist()
        assert list(bar.x) == df['importance'].tolist()
        assert len(bar.y) == 10
        assert max(bar.x) == 0.26
        assert bar.y[list(bar.x).index(0.26)] == 'max_delay'

    def test_no_resorting(self):
        """Unsorted input is drawn in the given order."""
        df = pd.DataFrame({
            'name': ['b', 'a', 'c'],
            'importance': [0.1, 0.5, 0.3],
        })
        fig = feature_importance_bar(df)
        assert list(fig.data[0].y) == ['b', 'a', 'c']

    def test_input_not_mutated(self):
        df = load_feature_importance()
        before = df.copy()
        feature_importance_bar(df)
        pd.testing.assert_frame_equal(df, before)


class TestThresholdImpactLine:
    """Test the threshold impact chart."""

    def test_three_metric_lines(self):
        fig = threshold_impact_line(load_threshold_impact())
        assert [trace.name for trace in fig.data] == ['precision', 'recall', 'f1']
        for trace in fig.data:
            assert len(trace.x) == 9

    def test_optimal_marker(self):
        fig = threshold_impact_line(load_threshold_impact(), optimal=0.4)
        assert len(fig.layout.shapes) == 1
        assert fig.layout.shapes[0].x0 == 0.4

    def test_no_marker_by_default(self):
        fig = threshold_impact_line(load_threshold_impact())
        assert len(fig.layout.shapes) == 0
