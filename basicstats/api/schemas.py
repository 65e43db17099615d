from typing import List, Optional
from pydantic import BaseModel, field_validator

# Input schema for /stats endpoint
class StatsIn(BaseModel):
    numbers: List[float]  # Values to summarize

    @field_validator('numbers')
    def check_numbers_min_length(cls, v):
        # Ensure at least one number is provided
        if len(v) < 1:
            raise ValueError('numbers must have at least 1 item')
        return v

    model_config = {"extra": "forbid"}  # Forbid extra fields in input

# Output schema for /stats endpoint
class StatsOut(BaseModel):
    count: int                     # Number of values
    mean: float                    # Arithmetic mean
    median: float                  # Median of the sorted values
    mode: float                    # Value of the first longest run
    stddev: float                  # Population standard deviation
    harmonic_mean: Optional[float]  # None when a value is 0
    unused_capacity: int           # Spare slots left in the buffer
