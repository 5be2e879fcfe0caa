from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from tsanalyzer import config


# Base input schema: an ordered list of data points
class SeriesIn(BaseModel):
    values: List[float]  # Data points, in time order

    @field_validator('values')
    def check_values_max_length(cls, v):
        # Reject oversized payloads up front
        if len(v) > config.MAX_POINTS:
            raise ValueError(f'values must have at most {config.MAX_POINTS} items')
        return v

    model_config = {"extra": "forbid"}  # Forbid extra fields in input


# Input schema for /series/variation
class VariationIn(SeriesIn):
    periods: int = Field(default=1, ge=0)  # Distance between compared points


# Input schema for /series/slice
class SliceIn(SeriesIn):
    start: int  # Inclusive
    end: int    # Exclusive


# Input schema for /series/map
class MapIn(SeriesIn):
    transform: str                                # Registered transform name
    argument: Optional[Union[float, str]] = None  # Transform parameter (factor, offset, prefix)


# Output schema for /series/variation
class VariationOut(BaseModel):
    diff: List[float]        # Consecutive differences
    pct_change: List[float]  # Consecutive relative changes


# Output schema for /series/slice
class SliceOut(BaseModel):
    values: List[float]
    length: int


# Output schema for /series/map
class MapOut(BaseModel):
    values: List[Any]  # Element type depends on the transform
