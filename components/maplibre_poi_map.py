"""MapLibre-based point-of-interest map component with per-category layers."""

import streamlit as st

from utils.filtering import build_component_data


# HTML template (just libraries)
COMPONENT_HTML = """
<script src="https://unpkg.com/maplibre-gl@4.7.1/dist/maplibre-gl.js"></script>
<link href="https://unpkg.com/maplibre-gl@4.7.1/dist/maplibre-gl.css" rel="stylesheet" />
"""

# CSS for component styling (height controlled here, not via parameter!)
COMPONENT_CSS = """
.map-container {
    width: 100%;
    height: 600px;
    position: relative;
}
.layer-control {
    position: absolute;
    top: 10px;
    left: 10px;
    background: rgba(255,255,255,0.95);
    padding: 10px 14px;
    border-radius: 6px;
    box-shadow: 0 2px 10px rgba(0,0,0,0.2);
    font-family: system-ui;
    font-size: 13px;
    z-index: 1000;
}
.layer-control label {
    display: flex;
    align-items: center;
    gap: 6px;
    cursor: pointer;
}
.layer-swatch {
    display: inline-block;
    width: 10px;
    height: 10px;
    border-radius: 50%;
}
.maplibregl-popup-content {
    font-size: 12px;
    padding: 10px;
    max-width: 300px;
}
"""

# JavaScript component logic
COMPONENT_JS = """
export default function(component) {
    const { parentElement, data } = component;

    const layers = data.layers || [];
    console.log('Layers received:', layers.length);

    let map = null;
    let mapContainer = null;

    function createElementsAndInit() {
        mapContainer = document.createElement('div');
        mapContainer.className = 'map-container';  // Height controlled by CSS!
        parentElement.appendChild(mapContainer);
        initMap();
    }

    // One checkbox per rendered category layer
    function createLayerControl() {
        const control = document.createElement('div');
        control.className = 'layer-control';

        layers.forEach((layer) => {
            const row = document.createElement('label');

            const checkbox = document.createElement('input');
            checkbox.type = 'checkbox';
            checkbox.checked = layer.checked;
            checkbox.addEventListener('change', () => {
                map.setLayoutProperty(layer.id, 'visibility', checkbox.checked ? 'visible' : 'none');
            });

            const swatch = document.createElement('span');
            swatch.className = 'layer-swatch';
            swatch.style.background = layer.color;

            const text = document.createElement('span');
            text.textContent = layer.label;

            row.appendChild(checkbox);
            row.appendChild(swatch);
            row.appendChild(text);
            control.appendChild(row);
        });

        mapContainer.appendChild(control);
    }

    // Popup: bold name on the first line, description below (plain text, verbatim)
    function buildPopupContent(props) {
        const wrapper = document.createElement('div');
        const title = document.createElement('strong');
        title.textContent = props.name;
        wrapper.appendChild(title);
        wrapper.appendChild(document.createElement('br'));
        wrapper.appendChild(document.createTextNode(props.description));
        return wrapper;
    }

    // Wait for MapLibre to load and initialize map
    function initMap() {
        if (typeof maplibregl === 'undefined') {
            setTimeout(initMap, 50);
            return;
        }

        map = new maplibregl.Map({
            container: mapContainer,
            style: {
                version: 8,
                sources: {
                    'osm': {
                        type: 'raster',
                        tiles: data.tiles.urls,
                        tileSize: 256,
                        attribution: data.tiles.attribution
                    }
                },
                layers: [
                    {
                        id: 'osm-layer',
                        type: 'raster',
                        source: 'osm',
                        minzoom: 0,
                        maxzoom: 19
                    }
                ]
            },
            center: [data.center.lon, data.center.lat],
            zoom: data.zoom
        });

        map.addControl(new maplibregl.NavigationControl(), 'top-right');

        map.on('load', () => {
            layers.forEach((layer) => {
                map.addSource(layer.id, {
                    type: 'geojson',
                    data: layer.geojson
                });

                map.addLayer({
                    id: layer.id,
                    type: 'circle',
                    source: layer.id,
                    layout: {
                        visibility: layer.checked ? 'visible' : 'none'
                    },
                    paint: {
                        'circle-color': layer.color,
                        'circle-radius': 8,
                        'circle-stroke-color': '#ffffff',
                        'circle-stroke-width': 2
                    }
                });

                map.on('mouseenter', layer.id, () => {
                    map.getCanvas().style.cursor = 'pointer';
                });

                map.on('mouseleave', layer.id, () => {
                    map.getCanvas().style.cursor = '';
                });

                map.on('click', layer.id, (e) => {
                    if (!e.features || e.features.length === 0) return;

                    const feature = e.features[0];
                    new maplibregl.Popup({ maxWidth: '300px' })
                        .setLngLat(feature.geometry.coordinates.slice())
                        .setDOMContent(buildPopupContent(feature.properties))
                        .addTo(map);
                });
            });

            createLayerControl();
            console.log('Map initialization complete');
        });

        // Tile and style failures stay inside the widget
        map.on('error', (e) => {
            console.error('MapLibre error:', e);
        });
    }

    createElementsAndInit();

    // Return cleanup function
    return () => {
        if (map) {
            map.remove();
        }
        if (mapContainer) {
            mapContainer.remove();
        }
    };
}
"""

# Register the component (v2: name, html, css, js - NO height parameter!)
poi_map = st.components.v2.component(
    "maplibre_poi_map",
    html=COMPONENT_HTML,
    css=COMPONENT_CSS,
    js=COMPONENT_JS
)


def render_maplibre_map(layers: list, center: list, zoom: int):
    """
    Render the MapLibre map with one marker layer per visible category.

    Args:
        layers: Layer dicts from utils.filtering.build_map_layers
        center: [lat, lon] for map center
        zoom: Initial zoom level
    """
    return poi_map(data=build_component_data(layers, center, zoom))
