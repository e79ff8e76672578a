"""Category filter predicate and map payload construction."""

from typing import Union

from utils.models import Category, Feature
from utils.settings import ALL_FILTER, CATEGORY_STYLES, TILE_ATTRIBUTION, TILE_URLS

ActiveFilter = Union[str, Category]

# Button order: "All" first, then categories in declaration order
FILTER_OPTIONS = [ALL_FILTER, *(category.value for category in Category)]


def parse_filter(value) -> ActiveFilter:
    """Normalize "All", a Category or a category value string to an ActiveFilter."""
    if value == ALL_FILTER:
        return ALL_FILTER
    return Category(value)


def should_show(category: Category, active_filter: ActiveFilter) -> bool:
    """Whether a category's layer is rendered under the active filter."""
    return active_filter == ALL_FILTER or active_filter == category


def visible_categories(active_filter: ActiveFilter) -> list[Category]:
    return [category for category in Category if should_show(category, active_filter)]


def visible_features(dataset: dict, active_filter: ActiveFilter) -> list[tuple[Category, Feature]]:
    """Flatten the features of every visible category into (category, feature) pairs."""
    return [
        (category, feature)
        for category in visible_categories(active_filter)
        for feature in dataset.get(category, ())
    ]


def feature_to_geojson(feature: Feature, category: Category) -> dict:
    """Build a GeoJSON Point feature carrying the popup fields."""
    return {
        "type": "Feature",
        "geometry": {
            "type": "Point",
            "coordinates": [feature.longitude, feature.latitude],
        },
        "properties": {
            "name": feature.name,
            "description": feature.description,
            "category": category.value,
        },
    }


def build_map_layers(dataset: dict, active_filter: ActiveFilter) -> list[dict]:
    """
    Build the per-category layer payload for the map component.

    Only categories passing should_show() are included. Each layer holds a
    GeoJSON FeatureCollection with one Point per feature.

    Args:
        dataset: Mapping of Category to its features
        active_filter: "All" or a single Category

    Returns:
        List of layer dicts, in category order
    """
    layers = []
    for category in visible_categories(active_filter):
        style = CATEGORY_STYLES[category]
        layers.append({
            "id": f"poi-{category.value.lower()}",
            "category": category.value,
            "label": style.label,
            "color": style.color,
            "checked": True,
            "geojson": {
                "type": "FeatureCollection",
                "features": [feature_to_geojson(f, category) for f in dataset.get(category, ())],
            },
        })
    return layers


def build_component_data(layers: list, center: list, zoom: int) -> dict:
    """
    Assemble the data payload passed to the map component.

    Args:
        layers: Layer dicts from build_map_layers
        center: [lat, lon] for map center
        zoom: Initial zoom level
    """
    return {
        "layers": layers,
        "center": {"lat": center[0], "lon": center[1]},
        "zoom": zoom,
        "tiles": {"urls": TILE_URLS, "attribution": TILE_ATTRIBUTION},
    }
