import duckdb
import pytest

from utils.dataset import build_dataset, read_feature_rows
from utils.settings import DATA_PATH


@pytest.fixture(scope="session")
def dataset():
    """The bundled dataset, loaded without Streamlit caching."""
    conn = duckdb.connect()
    try:
        return build_dataset(read_feature_rows(conn, DATA_PATH))
    finally:
        conn.close()


@pytest.fixture
def write_csv(tmp_path):
    """Write a dataset CSV with the standard header and return its path."""

    def _write(*rows):
        path = tmp_path / "features.csv"
        lines = ["category,name,description,longitude,latitude", *rows]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
