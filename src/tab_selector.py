"""
Single-choice tab switcher backed by session state.

Streamlit's st.tabs draws every tab body on each run and cannot be switched
from code, so views here are selected with a horizontal radio and only the
active panel is drawn.
"""

import logging
from typing import Callable, Dict, MutableMapping, Optional

import streamlit as st

logger = logging.getLogger(__name__)


class TabSelector:
    """
    Hold one active tab value and render the matching panel.

    Parameters
    ----------
    key : str
        Session state key that remembers the active value.
    tabs : dict
        Ordered mapping of tab value to display label. The set is fixed.
    default : str
        Value used on first render and when the remembered value is unknown.
    state : MutableMapping, optional
        Where the active value lives. Defaults to st.session_state.
    """

    def __init__(self, key: str, tabs: Dict[str, str], default: str,
                 state: Optional[MutableMapping] = None):
        if not tabs:
            raise ValueError("A tab selector needs at least one tab")
        if default not in tabs:
            raise ValueError(f"Default tab '{default}' not in {list(tabs)}")
        self.key = key
        self.tabs = dict(tabs)
        self.default = default
        self.state = st.session_state if state is None else state

    @property
    def widget_key(self) -> str:
        # Streamlit discards widget state when the widget is not drawn, so
        # the remembered value is kept under a separate key.
        return f"_{self.key}_widget"

    @property
    def active(self) -> str:
        value = self.state.get(self.key)
        if value is None:
            self.state[self.key] = self.default
            return self.default
        if value not in self.tabs:
            logger.warning(
                "Unknown tab '%s' for '%s', resetting to '%s'",
                value, self.key, self.default,
            )
            self.state[self.key] = self.default
            return self.default
        return value

    def select(self, value: str) -> None:
        """Make `value` the active tab."""
        if value not in self.tabs:
            raise ValueError(f"Unknown tab '{value}' for '{self.key}'")
        logger.debug("Tab '%s' -> '%s'", self.key, value)
        self.state[self.key] = value

    def _sync_from_widget(self) -> None:
        self.select(self.state[self.widget_key])

    def widget(self, label: str) -> None:
        """Draw the tab strip as a horizontal radio."""
        self.state[self.widget_key] = self.active
        st.radio(
            label,
            options=list(self.tabs),
            format_func=self.tabs.get,
            key=self.widget_key,
            on_change=self._sync_from_widget,
            horizontal=True,
            label_visibility="collapsed",
        )

    def render(self, panels: Dict[str, Callable[[], None]]) -> str:
        """
        Call the panel for the active tab, and only that one.

        Parameters
        ----------
        panels : dict
            Tab value to zero-argument callable. Keys must match the tab set.

        Returns
        -------
        str - the tab value that was rendered
        """
        if set(panels) != set(self.tabs):
            raise ValueError(
                f"Panels {sorted(panels)} do not match tabs {sorted(self.tabs)}"
            )
        value = self.active
        panels[value]()
        return value
