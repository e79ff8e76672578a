import pytest

from utils.filtering import (
    FILTER_OPTIONS,
    build_component_data,
    build_map_layers,
    parse_filter,
    should_show,
    visible_categories,
    visible_features,
)
from utils.models import Category
from utils.settings import ALL_FILTER, MAP_CENTER, MAP_ZOOM, TILE_URLS


def rendered_names(layers):
    return [
        feature["properties"]["name"]
        for layer in layers
        for feature in layer["geojson"]["features"]
    ]


# ------------------------------------------------------
# Visibility predicate
# ------------------------------------------------------


class TestShouldShow:
    @pytest.mark.parametrize("category", list(Category))
    def test_all_shows_every_category(self, category):
        assert should_show(category, ALL_FILTER) is True

    @pytest.mark.parametrize("category", list(Category))
    @pytest.mark.parametrize("active", list(Category))
    def test_single_category_filter(self, category, active):
        assert should_show(category, active) is (category == active)

    def test_accepts_plain_category_value(self):
        assert should_show(Category.PUBLIC_SERVICES, "PublicServices") is True
        assert should_show(Category.UTILITIES, "PublicServices") is False


class TestParseFilter:
    def test_all_sentinel(self):
        assert parse_filter("All") == ALL_FILTER

    def test_category_value(self):
        assert parse_filter("Healthcare") is Category.HEALTHCARE

    def test_category_member(self):
        assert parse_filter(Category.EDUCATION) is Category.EDUCATION

    def test_unknown_value_raises(self):
        with pytest.raises(ValueError):
            parse_filter("Parks")

    def test_display_label_is_not_a_value(self):
        with pytest.raises(ValueError):
            parse_filter("Public Services")


def test_filter_options_order():
    assert FILTER_OPTIONS == [
        "All", "Healthcare", "Education", "Transportation", "Utilities", "PublicServices",
    ]


def test_visible_categories():
    assert visible_categories(ALL_FILTER) == list(Category)
    assert visible_categories(Category.UTILITIES) == [Category.UTILITIES]


# ------------------------------------------------------
# Map layer payload
# ------------------------------------------------------


class TestBuildMapLayers:
    def test_all_renders_every_marker(self, dataset):
        layers = build_map_layers(dataset, ALL_FILTER)

        assert [layer["category"] for layer in layers] == [c.value for c in Category]
        assert len(rendered_names(layers)) == 9
        assert [len(layer["geojson"]["features"]) for layer in layers] == [2, 2, 2, 1, 2]

    def test_healthcare_renders_exactly_its_two_markers(self, dataset):
        layers = build_map_layers(dataset, Category.HEALTHCARE)

        assert len(layers) == 1
        assert rendered_names(layers) == ["General Hospital Dutse", "Dutse Health Centre"]

    @pytest.mark.parametrize("active", list(Category))
    def test_single_category_renders_only_that_category(self, dataset, active):
        layers = build_map_layers(dataset, active)

        assert [layer["category"] for layer in layers] == [active.value]
        expected = [feature.name for feature in dataset[active]]
        assert rendered_names(layers) == expected

    @pytest.mark.parametrize("active", FILTER_OPTIONS)
    def test_feature_rendered_iff_predicate_true(self, dataset, active):
        active = parse_filter(active)
        rendered = set(rendered_names(build_map_layers(dataset, active)))

        for category, features in dataset.items():
            for feature in features:
                assert (feature.name in rendered) is should_show(category, active)

    def test_reselecting_filter_is_idempotent(self, dataset):
        first = build_map_layers(dataset, Category.EDUCATION)
        second = build_map_layers(dataset, Category.EDUCATION)

        assert first == second

    def test_popup_fields_are_verbatim(self, dataset):
        layers = build_map_layers(dataset, ALL_FILTER)
        by_name = {
            feature["properties"]["name"]: feature
            for layer in layers
            for feature in layer["geojson"]["features"]
        }

        for features in dataset.values():
            for feature in features:
                properties = by_name[feature.name]["properties"]
                assert properties["name"] == feature.name
                assert properties["description"] == feature.description

    def test_point_geometry_is_lon_lat(self, dataset):
        layer = build_map_layers(dataset, Category.EDUCATION)[0]
        geometry = layer["geojson"]["features"][0]["geometry"]

        assert geometry == {"type": "Point", "coordinates": [9.1905, 12.0522]}

    def test_layer_style(self, dataset):
        layer = build_map_layers(dataset, Category.PUBLIC_SERVICES)[0]

        assert layer["id"] == "poi-publicservices"
        assert layer["label"] == "Public Services"
        assert layer["color"] == "purple"
        assert layer["checked"] is True

    def test_empty_category_renders_empty_layer(self):
        layers = build_map_layers({Category.HEALTHCARE: ()}, Category.UTILITIES)

        assert len(layers) == 1
        assert layers[0]["geojson"]["features"] == []


def test_visible_features_pairs(dataset):
    pairs = visible_features(dataset, Category.TRANSPORTATION)

    assert [(c, f.name) for c, f in pairs] == [
        (Category.TRANSPORTATION, "Dutse Bus Terminal"),
        (Category.TRANSPORTATION, "Dutse Railway Station"),
    ]
    assert len(visible_features(dataset, ALL_FILTER)) == 9


def test_build_component_data(dataset):
    layers = build_map_layers(dataset, ALL_FILTER)
    data = build_component_data(layers, MAP_CENTER, MAP_ZOOM)

    assert data["center"] == {"lat": 12.0022, "lon": 9.1605}
    assert data["zoom"] == 7
    assert data["layers"] is layers
    assert data["tiles"]["urls"] == TILE_URLS
    assert "OpenStreetMap" in data["tiles"]["attribution"]
