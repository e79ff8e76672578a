"""Glossary term definitions for the Jigawa State Infrastructure Map."""

GLOSSARY_TERMS = {
    "concepts": {
        "label": "Map Concepts",
        "icon": "🗺️",
        "terms": {
            "Feature": {
                "definition": "A single point of interest with a name, a description and a coordinate."
            },
            "Category": {
                "definition": "A group of features sharing an infrastructure type and a display color.",
                "note": "Every feature belongs to exactly one category."
            },
            "Layer": {
                "definition": "A togglable group of markers for one category. Use the checkboxes in the top-left corner of the map to hide or show a layer."
            },
            "Active Filter": {
                "definition": "The category selected with the buttons above the map, or **All**. Only the active category's layer is drawn on the map.",
                "note": "The filter resets to All when the page is reloaded."
            }
        }
    },
    "categories": {
        "label": "Infrastructure Categories",
        "icon": "🏗️",
        "terms": {
            "Healthcare": {
                "definition": "Hospitals and community health centres.",
                "color": "red"
            },
            "Education": {
                "definition": "Primary and secondary schools.",
                "color": "blue"
            },
            "Transportation": {
                "definition": "Bus terminals and railway stations.",
                "color": "orange"
            },
            "Utilities": {
                "definition": "Water supply and other utility facilities.",
                "color": "green"
            },
            "Public Services": {
                "definition": "Police and fire stations.",
                "color": "purple"
            }
        }
    }
}
