"""
Pydantic schemas for coasters.

The wire format uses camelCase for ``inPark``; Python code reads the
attribute as ``in_park``.  Only the wire name is accepted on input, so
models are built from alias-keyed data (``model_dump(by_alias=True)``).
"""

from pydantic import BaseModel, ConfigDict, Field


class CoasterBase(BaseModel):
    """Fields shared by incoming payloads and stored records."""

    name: str = Field("", description="Name of the ride")
    in_park: str = Field("", alias="inPark", description="Park the ride is located in")
    manufacturer: str = Field("", description="Company that built the ride")
    height: int = Field(0, description="Height in metres")


class CoasterCreate(CoasterBase):
    """Schema for creating a coaster.

    Unknown keys, including any client supplied ``id``, are ignored.
    """


class Coaster(CoasterBase):
    """A stored coaster.  Records are immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Server assigned identifier")
