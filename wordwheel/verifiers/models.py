"""Data models for puzzle verification."""

from typing import List, Optional
from pydantic import BaseModel, Field


class ValidationError(BaseModel):
    """A single validation error."""
    code: str
    message: str
    word: Optional[str] = None


class ValidationResult(BaseModel):
    """Result of puzzle validation."""
    valid: bool
    errors: List[ValidationError] = Field(default_factory=list)
    words: List[str] = Field(default_factory=list)
    grid: Optional[str] = None
    letters_used: List[str] = Field(default_factory=list)  # Letters on the grid, each cell once
