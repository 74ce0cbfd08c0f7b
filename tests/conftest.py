from unittest.mock import MagicMock

import pytest


def _columns(spec, **kwargs):
    count = spec if isinstance(spec, int) else len(spec)
    return [MagicMock() for _ in range(count)]


@pytest.fixture
def fake_st(monkeypatch):
    """MagicMock patched over every module's `st`, recording Streamlit calls."""
    fake = MagicMock()
    fake.columns.side_effect = _columns
    for target in ("src.tab_selector.st", "src.dashboard.st", "src.notebook.st"):
        monkeypatch.setattr(target, fake)
    return fake


@pytest.fixture
def chart_titles(fake_st):
    """Titles of every figure passed to st.plotly_chart so far."""
    def _titles():
        return [c.args[0].layout.title.text for c in fake_st.plotly_chart.call_args_list]
    return _titles
