"""
Payment Default Prediction Analysis.

Single-page Streamlit app with two views:
  Interactive Visualization: the four-tab metrics dashboard
  Python Notebook: notebook summary and sample scoring script

Run with:
    streamlit run app.py
"""

import logging
from typing import MutableMapping, Optional

import streamlit as st

from src.config import LOG_FORMAT, LOG_LEVEL, PAGE_ICON, PAGE_LAYOUT, PAGE_TITLE
from src.dashboard import render_dashboard
from src.metrics_data import validate_tables
from src.notebook import render_notebook
from src.tab_selector import TabSelector

logger = logging.getLogger(__name__)

PAGE_TAB_KEY = "page_tab"
PAGE_TABS = {
    "visualization": "Interactive Visualization",
    "notebook": "Python Notebook",
}


def page_selector(state: Optional[MutableMapping] = None) -> TabSelector:
    return TabSelector(PAGE_TAB_KEY, PAGE_TABS, "visualization", state=state)


def render_page(state: Optional[MutableMapping] = None) -> str:
    """Draw the page tab strip and the active view. Returns the view drawn."""
    selector = page_selector(state)
    selector.widget("Page view")
    return selector.render({
        "visualization": lambda: render_dashboard(state),
        "notebook": lambda: render_notebook(
            on_view_visualization=lambda: selector.select("visualization")
        ),
    })


def resolve_log_level(name: str) -> int:
    """Map a level name to its number, falling back to INFO for unknown names."""
    level = logging.getLevelName(str(name).upper())
    if isinstance(level, int):
        return level
    logger.warning("Unknown log level %r, using INFO", name)
    return logging.INFO


def main() -> None:
    st.set_page_config(page_title=PAGE_TITLE, page_icon=PAGE_ICON, layout=PAGE_LAYOUT)
    logging.basicConfig(level=resolve_log_level(LOG_LEVEL), format=LOG_FORMAT)

    try:
        validate_tables()
    except ValueError as exc:
        logger.exception("Metric tables failed validation")
        st.error(f"Dashboard data is inconsistent: {exc}")
        st.stop()

    st.title(PAGE_TITLE)
    render_page()


if __name__ == "__main__":
    main()
