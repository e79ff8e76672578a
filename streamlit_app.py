import logging

import streamlit as st

from utils.dataset import DatasetError, get_dataset
from utils.logging_config import configure_logging
from utils.settings import PAGE_TITLE

configure_logging()
logger = logging.getLogger(__name__)

st.set_page_config(layout="wide", page_title=PAGE_TITLE)

# Load the shared dataset (only once per app); the map page reports failures to the user
try:
    get_dataset()
except DatasetError:
    logger.exception("Infrastructure dataset failed to load")

# Define pages
pages = [
    st.Page("pages/home.py", title="Home", icon="🏠"),
    st.Page("pages/infrastructure_map.py", title="Infrastructure Map", icon="🗺️", default=True),
]

# Top bar navigation
pg = st.navigation(pages, position="top")
pg.run()
