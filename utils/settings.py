"""App-wide constants for the infrastructure map."""

from pathlib import Path

from utils.models import Category, CategoryStyle

PAGE_TITLE = "Jigawa State Infrastructure Map"

# Dataset location (compiled into the repo, read once at startup)
DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "infrastructure_features.csv"

# Filter state
ALL_FILTER = "All"
ACTIVE_FILTER_KEY = "active_filter"

# Map view - center of Jigawa [lat, lon]
MAP_CENTER = [12.0022, 9.1605]
MAP_ZOOM = 7

TILE_URLS = [
    "https://a.tile.openstreetmap.org/{z}/{x}/{y}.png",
    "https://b.tile.openstreetmap.org/{z}/{x}/{y}.png",
    "https://c.tile.openstreetmap.org/{z}/{x}/{y}.png",
]
TILE_ATTRIBUTION = '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'

# Category display configuration, in button/layer order
CATEGORY_STYLES = {
    Category.HEALTHCARE: CategoryStyle(label="Healthcare", color="red", icon="🔴"),
    Category.EDUCATION: CategoryStyle(label="Education", color="blue", icon="🔵"),
    Category.TRANSPORTATION: CategoryStyle(label="Transportation", color="orange", icon="🟠"),
    Category.UTILITIES: CategoryStyle(label="Utilities", color="green", icon="🟢"),
    Category.PUBLIC_SERVICES: CategoryStyle(label="Public Services", color="purple", icon="🟣"),
}
