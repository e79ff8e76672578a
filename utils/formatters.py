"""Shared formatting helper functions for display values."""

import pandas as pd

from utils.models import Category
from utils.settings import ALL_FILTER, CATEGORY_STYLES


def format_coordinates(latitude, longitude, decimals=4) -> str:
    """Format a lat/lon pair with hemisphere letters."""
    if latitude is None or longitude is None or pd.isna(latitude) or pd.isna(longitude):
        return "N/A"
    try:
        lat_hemisphere = "N" if latitude >= 0 else "S"
        lon_hemisphere = "E" if longitude >= 0 else "W"
        return (
            f"{abs(latitude):.{decimals}f}°{lat_hemisphere}, "
            f"{abs(longitude):.{decimals}f}°{lon_hemisphere}"
        )
    except (ValueError, TypeError):
        return "N/A"


def format_category_label(active_filter, with_icon=False) -> str:
    """Format a filter value (a Category or "All") for display."""
    if active_filter == ALL_FILTER:
        return "🗺️ All" if with_icon else "All"

    try:
        style = CATEGORY_STYLES[Category(active_filter)]
    except ValueError:
        return str(active_filter)
    return f"{style.icon} {style.label}" if with_icon else style.label


def format_feature_count(shown: int, total: int) -> str:
    """Format the visible feature count caption."""
    noun = "feature" if total == 1 else "features"
    if shown == total:
        return f"Showing all {total:,} {noun}"
    return f"Showing {shown:,} of {total:,} {noun}"


def build_feature_table(features: list) -> pd.DataFrame:
    """
    Build the sidebar table of visible features.

    Args:
        features: (Category, Feature) pairs, as returned by visible_features()

    Returns:
        DataFrame with Category, Name, Description and Location columns
    """
    rows = [
        {
            "Category": format_category_label(category),
            "Name": feature.name,
            "Description": feature.description,
            "Location": format_coordinates(feature.latitude, feature.longitude),
        }
        for category, feature in features
    ]
    return pd.DataFrame(rows, columns=["Category", "Name", "Description", "Location"])
