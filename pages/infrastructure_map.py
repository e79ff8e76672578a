import streamlit as st

from components.filter_buttons import get_active_filter, render_filter_buttons
from components.glossary_dialog import color_swatch_html, render_glossary_button
from utils.dataset import DatasetError, get_dataset
from utils.filtering import build_map_layers, visible_features
from utils.formatters import build_feature_table, format_category_label, format_feature_count
from utils.settings import CATEGORY_STYLES, MAP_CENTER, MAP_ZOOM, PAGE_TITLE

try:
    dataset = get_dataset()
except DatasetError as e:
    st.error(f"Error loading infrastructure data: {e}")
    st.stop()

# Per-session filter state (resets to "All" for a new session)
active_filter = get_active_filter()

shown = visible_features(dataset, active_filter)
total_count = sum(len(features) for features in dataset.values())

# Sidebar
with st.sidebar:
    st.title("Infrastructure Map")
    st.markdown(f"**Active filter:** {format_category_label(active_filter, with_icon=True)}")

    # Legend
    st.markdown("### Legend")
    legend_html = "".join(
        f"<div>{color_swatch_html(style.color)}{style.label}</div>"
        for style in CATEGORY_STYLES.values()
    )
    st.markdown(legend_html, unsafe_allow_html=True)

    st.caption(format_feature_count(len(shown), total_count))
    st.dataframe(build_feature_table(shown), hide_index=True, width="stretch")

    st.markdown("---")
    render_glossary_button()

st.title(PAGE_TITLE)
st.markdown("Use the filters below to explore different types of infrastructure in Jigawa State.")

render_filter_buttons(active_filter)

if not shown:
    st.info(f"No {format_category_label(active_filter).lower()} features in the dataset.")

# Import map component
from components.maplibre_poi_map import render_maplibre_map

render_maplibre_map(
    layers=build_map_layers(dataset, active_filter),
    center=MAP_CENTER,
    zoom=MAP_ZOOM,
)
