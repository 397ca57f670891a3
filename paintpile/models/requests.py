from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class ColorMatchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    hex: str = Field(min_length=1, max_length=16)
    max_results: Optional[int] = Field(default=None, ge=1, le=50, alias="maxResults")


class RoleColor(BaseModel):
    hex: str = Field(min_length=1, max_length=16)
    location: Optional[str] = None


class RoleMatchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    colors: list[RoleColor] = Field(min_length=1, max_length=20)
    matches_per_color: int = Field(default=3, ge=1, le=20, alias="matchesPerColor")


class ResolvePaintSetRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    set_id: Optional[str] = Field(default=None, alias="setId")
    set_name: Optional[str] = Field(default=None, alias="setName")
    brand: Optional[str] = None
