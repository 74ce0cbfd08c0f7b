"""Tests for src/dashboard.py"""

import pytest

from src.config import PAGE_TITLE
from src.dashboard import (
    DASHBOARD_PANELS,
    DASHBOARD_TAB_KEY,
    DASHBOARD_TABS,
    render_dashboard,
    render_feature_analysis,
    render_model_performance,
    render_overview,
    render_threshold_optimization,
)
from src.metrics_data import OPTIMAL_THRESHOLD_NOTE, PROJECT_SUMMARY


EXPECTED_CHARTS = {
    'overview': {"Default Distribution", "Payment Status Distribution"},
    'model': {"Model Comparison (AUC)", "ROC Curve (Random Forest)"},
    'features': {"Top 10 Feature Importance"},
    'optimization': {"Threshold Impact on Model Metrics"},
}


def test_every_tab_has_a_panel():
    assert set(DASHBOARD_PANELS) == set(DASHBOARD_TABS)
    assert list(DASHBOARD_TABS.values()) == [
        "Overview", "Model Performance", "Feature Analysis", "Threshold Optimization",
    ]


# ---------------------------------------------------------------------------
# render_dashboard
# ---------------------------------------------------------------------------

class TestRenderDashboard:
    """Test the dashboard tab strip and sub-view switch."""

    def test_defaults_to_overview(self, fake_st):
        state = {}
        assert render_dashboard(state) == 'overview'
        assert state[DASHBOARD_TAB_KEY] == 'overview'
        fake_st.header.assert_called_once_with(PAGE_TITLE)

    @pytest.mark.parametrize('value', list(DASHBOARD_TABS))
    def test_only_active_view_drawn(self, fake_st, chart_titles, value):
        state = {DASHBOARD_TAB_KEY: value}
        assert render_dashboard(state) == value
        assert set(chart_titles()) == EXPECTED_CHARTS[value]

    def test_tab_strip_drawn(self, fake_st):
        render_dashboard({})
        kwargs = fake_st.radio.call_args.kwargs
        assert kwargs['options'] == list(DASHBOARD_TABS)


# ---------------------------------------------------------------------------
# Sub-views
# ---------------------------------------------------------------------------

class TestOverview:
    """Test the Overview sub-view."""

    def test_summary_paragraphs(self, fake_st):
        render_overview()
        shown = [c.args[0] for c in fake_st.markdown.call_args_list]
        for paragraph in PROJECT_SUMMARY:
            assert paragraph in shown

    def test_pie_sums_to_100(self, fake_st):
        render_overview()
        pie = fake_st.plotly_chart.call_args_list[0].args[0].data[0]
        assert sum(pie.values) == 100


class TestModelPerformance:
    """Test the Model Performance sub-view."""

    def test_final_metric_progress_bars(self, fake_st):
        render_model_performance()
        values = [c.args[0] for c in fake_st.progress.call_args_list]
        assert values == [82, 78, 73, 75]

    def test_metric_captions(self, fake_st):
        render_model_performance()
        captions = [c.args[0] for c in fake_st.caption.call_args_list]
        assert captions == ['82%', '78%', '73%', '75%']

    def test_section_heading(self, fake_st):
        render_model_performance()
        fake_st.subheader.assert_called_once_with("Final Model Metrics (Random Forest)")


class TestFeatureAnalysis:
    """Test the Feature Analysis sub-view."""

    def test_ten_rows_verbatim(self, fake_st):
        render_feature_analysis()
        bar = fake_st.plotly_chart.call_args.args[0].data[0]
        assert len(bar.y) == 10
        assert bar.y[0] == 'max_delay'
        assert bar.x[0] == 0.26

    def test_raw_table(self, fake_st):
        render_feature_analysis()
        table = fake_st.dataframe.call_args.args[0]
        assert len(table) == 10
        assert table['importance'].max() == 0.26


class TestThresholdOptimization:
    """Test the Threshold Optimization sub-view."""

    def test_optimal_threshold_heading(self, fake_st):
        render_threshold_optimization()
        fake_st.markdown.assert_any_call("**Optimal Threshold: 0.4**")
        fake_st.caption.assert_called_once_with(OPTIMAL_THRESHOLD_NOTE)

    def test_nine_threshold_rows(self, fake_st):
        render_threshold_optimization()
        table = fake_st.dataframe.call_args.args[0]
        assert table['threshold'].tolist() == [
            0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9,
        ]


class TestLayoutWidth:
    """Test that charts and tables fill their column."""

    @pytest.mark.parametrize('view', list(DASHBOARD_PANELS.values()))
    def test_stretch_width(self, fake_st, view):
        view()
        calls = fake_st.plotly_chart.call_args_list + fake_st.dataframe.call_args_list
        assert calls
        for c in calls:
            assert c.kwargs['width'] == "stretch"
            assert 'use_container_width' not in c.kwargs
