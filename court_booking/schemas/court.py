"""Court schemas."""
from pydantic import BaseModel, ConfigDict
from typing import List


class CourtInDB(BaseModel):
    """Schema for court from database."""

    id: int
    sport_type: str
    court_no: int

    model_config = ConfigDict(from_attributes=True)


class CourtListResponse(BaseModel):
    """Schema for court list responses."""

    courts: List[CourtInDB]
