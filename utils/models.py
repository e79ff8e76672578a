"""Typed records for the infrastructure dataset."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """Infrastructure type a feature is grouped under."""

    HEALTHCARE = "Healthcare"
    EDUCATION = "Education"
    TRANSPORTATION = "Transportation"
    UTILITIES = "Utilities"
    PUBLIC_SERVICES = "PublicServices"


class Feature(BaseModel):
    """A single point of interest."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    description: str
    longitude: float = Field(..., ge=-180, le=180)
    latitude: float = Field(..., ge=-90, le=90)


class CategoryStyle(BaseModel):
    """Display settings for one category layer."""

    model_config = ConfigDict(frozen=True)

    label: str
    color: str
    icon: str
