"""Category filter buttons backed by per-session state."""

import logging

import streamlit as st

from utils.filtering import FILTER_OPTIONS, parse_filter
from utils.formatters import format_category_label
from utils.settings import ACTIVE_FILTER_KEY, ALL_FILTER

logger = logging.getLogger(__name__)


def get_active_filter(state=None):
    """
    Read the active filter, initializing it to "All" on first access.

    Args:
        state: Mutable mapping holding the filter (defaults to st.session_state)
    """
    if state is None:
        state = st.session_state
    if ACTIVE_FILTER_KEY not in state:
        state[ACTIVE_FILTER_KEY] = ALL_FILTER
    return parse_filter(state[ACTIVE_FILTER_KEY])


def set_active_filter(value, state=None):
    """Button callback: publish the selected filter value."""
    if state is None:
        state = st.session_state
    if state.get(ACTIVE_FILTER_KEY) == value:
        return
    logger.debug("Active filter changed: %s -> %s", state.get(ACTIVE_FILTER_KEY), value)
    state[ACTIVE_FILTER_KEY] = value


def render_filter_buttons(active_filter):
    """
    Render one button per filter option in a single row.

    The active option is highlighted as a primary button. Clicking a button
    updates the session's active filter before Streamlit reruns the page.

    Args:
        active_filter: Currently active filter ("All" or a Category)
    """
    columns = st.columns(len(FILTER_OPTIONS))
    for column, option in zip(columns, FILTER_OPTIONS):
        with column:
            st.button(
                format_category_label(option, with_icon=True),
                key=f"filter_{option}",
                type="primary" if option == active_filter else "secondary",
                on_click=set_active_filter,
                args=(option,),
                width="stretch",
            )
