"""
Input validation schemas using Pydantic for better data integrity.

Text fields end up inside "|"-delimited records, so the delimiter is rejected here.
"""
import re
from datetime import datetime
from typing import List

from pydantic import BaseModel, Field, field_validator

from savr.utilities.constants import DATE_FORMAT, DATE_PATTERN, FIELD_DELIMITER


def _clean_text(v):
    if isinstance(v, str):
        v = v.strip()
        if FIELD_DELIMITER in v:
            raise ValueError(f"'{FIELD_DELIMITER}' is not allowed")
    return v


class GroceryItemInput(BaseModel):
    """Schema for grocery item input validation."""
    emoji: str = Field("", max_length=16)
    name: str = Field(..., min_length=1, max_length=100)
    category: str = Field("Other", min_length=1, max_length=50)
    quantity: str = Field("", max_length=50)

    @field_validator('emoji', 'name', 'category', 'quantity', mode='before')
    @classmethod
    def strip_and_reject_delimiter(cls, v):
        """Remove leading/trailing whitespace and refuse the record delimiter."""
        return _clean_text(v)


class InventoryItemInput(GroceryItemInput):
    """Schema for inventory item input validation."""
    expiry_date: str = Field(..., description="DD/MM/YYYY")

    @field_validator('expiry_date')
    @classmethod
    def validate_expiry_date(cls, v):
        v = _clean_text(v)
        if not re.fullmatch(DATE_PATTERN, v):
            raise ValueError('expiry_date must be DD/MM/YYYY')
        try:
            datetime.strptime(v, DATE_FORMAT)
        except ValueError:
            raise ValueError('expiry_date must be a real DD/MM/YYYY date')
        return v


class PlanDayInput(BaseModel):
    """Schema for setting the recipes of one planned day."""
    recipe_ids: List[str] = Field(default_factory=list)

    @field_validator('recipe_ids')
    @classmethod
    def dedupe_ids(cls, v):
        """Drop blanks and duplicates, keeping first occurrence order."""
        seen = []
        for rid in v:
            rid = rid.strip()
            if rid and rid not in seen:
                seen.append(rid)
        return seen


class ProfileCreateInput(BaseModel):
    display_name: str = Field("", max_length=100)
    username: str = Field("", max_length=50)
    dietary_preferences: List[str] = Field(default_factory=list)
