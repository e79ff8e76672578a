"""Infrastructure dataset loading using DuckDB and Streamlit caching."""

import logging

import duckdb
import pandas as pd
import streamlit as st
from pydantic import ValidationError

from utils.models import Category, Feature
from utils.settings import DATA_PATH

logger = logging.getLogger(__name__)

# Explicit column types so DuckDB never has to sniff the file
CSV_COLUMNS = {
    "category": "VARCHAR",
    "name": "VARCHAR",
    "description": "VARCHAR",
    "longitude": "DOUBLE",
    "latitude": "DOUBLE",
}


class DatasetError(Exception):
    """Raised when the infrastructure dataset cannot be read or fails validation."""


@st.cache_resource
def get_duckdb_connection():
    """
    Get or create a shared in-memory DuckDB connection (app-wide singleton).

    Returns:
        duckdb.DuckDBPyConnection: Shared DuckDB connection
    """
    return duckdb.connect()


def read_feature_rows(conn, path) -> pd.DataFrame:
    """
    Read the raw feature rows from the dataset CSV.

    Args:
        conn: DuckDB connection
        path: Location of the CSV file

    Returns:
        DataFrame with one row per feature

    Raises:
        DatasetError: If DuckDB cannot read the file
    """
    escaped_path = str(path).replace("'", "''")
    columns_sql = ", ".join(f"'{name}': '{dtype}'" for name, dtype in CSV_COLUMNS.items())
    query = f"""
    SELECT category, name, description, longitude, latitude
    FROM read_csv('{escaped_path}', header = true, columns = {{{columns_sql}}})
    """
    try:
        return conn.execute(query).fetchdf()
    except duckdb.Error as e:
        raise DatasetError(f"Could not read dataset {path}: {e}") from e


def build_dataset(df: pd.DataFrame) -> dict[Category, tuple[Feature, ...]]:
    """
    Validate raw rows into Feature records grouped by category.

    Every category is present in the result, even when it has no features.
    A feature name may only appear once across the whole dataset.

    Raises:
        DatasetError: On an unknown category, an invalid row or a duplicate name
    """
    grouped = {category: [] for category in Category}
    seen = {}

    for row_number, row in enumerate(df.to_dict("records"), start=1):
        try:
            category = Category(row["category"])
        except ValueError as e:
            raise DatasetError(f"Row {row_number}: unknown category {row['category']!r}") from e

        try:
            feature = Feature(
                name=row["name"],
                description=row["description"],
                longitude=row["longitude"],
                latitude=row["latitude"],
            )
        except ValidationError as e:
            raise DatasetError(f"Row {row_number}: invalid feature: {e}") from e

        if feature.name in seen:
            raise DatasetError(
                f"Row {row_number}: feature {feature.name!r} is already listed under {seen[feature.name].value}"
            )
        seen[feature.name] = category
        grouped[category].append(feature)

    return {category: tuple(features) for category, features in grouped.items()}


@st.cache_data
def load_dataset(_conn, path: str) -> dict[Category, tuple[Feature, ...]]:
    """
    Load and validate the dataset. Cached and shared across all sessions.

    The underscore prefix on _conn tells Streamlit not to hash the connection object.
    """
    dataset = build_dataset(read_feature_rows(_conn, path))
    logger.info(
        "Loaded %d features: %s",
        sum(len(features) for features in dataset.values()),
        ", ".join(f"{category.value}={len(features)}" for category, features in dataset.items()),
    )
    return dataset


def get_dataset():
    """Get the shared dataset, loading it on first use."""
    return load_dataset(get_duckdb_connection(), str(DATA_PATH))
