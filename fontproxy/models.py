"""
Pydantic models for family descriptors and @font-face records.

Both models are frozen: descriptors are built once per request and records
are never mutated, transformations produce copies instead.

License: MIT
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class FamilyDescriptor(BaseModel):
    """
    Parsed instruction for one requested font family.

    Option keys other than rename/exclude/include are kept as extra fields
    and ignored by the transformer.
    """
    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    family: str = Field(..., description="Family name as requested (e.g., 'Roboto')")
    axis: Optional[str] = Field(default=None, description="Axis tuple passed to upstream (e.g., 'wght@400;700')")
    google_family: str = Field(..., alias="googleFamily", description="Family value sent upstream")
    rename: Optional[str] = Field(default=None, description="Family name for the duplicated faces")
    exclude: Optional[str] = Field(default=None, description="Unicode ranges removed from matching faces")
    include: Optional[str] = Field(default=None, description="Unicode range replacing the one of matching faces")


class FontFace(BaseModel):
    """One @font-face block with values kept verbatim from the CSS."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    font_family: str = Field(..., alias="font-family", description="Quoted family name (e.g., \"'Open Sans'\")")
    font_style: str = Field(..., alias="font-style")
    font_weight: str = Field(..., alias="font-weight")
    font_display: Optional[str] = Field(default=None, alias="font-display")
    src: str = Field(...)
    unicode_range: Optional[str] = Field(default=None, alias="unicode-range")
