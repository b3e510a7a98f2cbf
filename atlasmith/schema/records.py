"""
Atlas Schema: records, placements and pages

COORDINATE SYSTEM:
Top-left origin, x grows right, y grows down (matches Pillow image coordinates).

OWNERSHIP:
- RectRecord is immutable. It only knows its id, size and optional source file.
- Placement binds one record to an (x, y) offset. Placements are produced by
  the page placer and owned by the Page they end up on.
- Page owns an ordered list of placements. The order is the order the packer
  placed them in (largest area first), which is also the manifest order.

Nothing in the packer mutates a record, so the same record list can be packed
again with a different configuration without any reset step.

UNITS:
All sizes and offsets are integer pixels.
"""

from __future__ import annotations
from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, model_validator

#########################
# RECORDS
#########################

class RectRecord(BaseModel):
    """
    A named rectangle with a fixed size.

    Usually one source image; `id` is the filename written to the manifest.
    """
    model_config = ConfigDict(extra='forbid', frozen=True)

    id: str = Field(..., description="Unique identifier within a run (the source filename).")
    width: int = Field(..., gt=0, description="Width in pixels.")
    height: int = Field(..., gt=0, description="Height in pixels.")
    source: Optional[Path] = Field(None, description="Image file holding the pixels, if any.")

    @property
    def area(self) -> int:
        return self.width * self.height


class Placement(BaseModel):
    """A record positioned at a top-left offset inside a page."""
    model_config = ConfigDict(extra='forbid', frozen=True)

    record: RectRecord
    x: int = Field(..., ge=0, description="Left edge in pixels.")
    y: int = Field(..., ge=0, description="Top edge in pixels.")

    @property
    def right(self) -> int:
        return self.x + self.record.width

    @property
    def bottom(self) -> int:
        return self.y + self.record.height


class PlacementResult(BaseModel):
    """
    Outcome of one page placement attempt.

    `placed_count` counts records from the front of the attempted sequence
    that got a position before the first failure (all of them on success).
    """
    model_config = ConfigDict(extra='forbid')

    success: bool
    placed_count: int = Field(..., ge=0)
    placements: List[Placement] = Field(default_factory=list)

    @model_validator(mode='after')
    def validate_count(self):
        if len(self.placements) != self.placed_count:
            raise ValueError("placements must hold exactly placed_count entries")
        return self

#########################
# PAGES
#########################

class Page(BaseModel):
    """
    One output atlas canvas and the records placed on it.
    """
    model_config = ConfigDict(extra='forbid')

    number: int = Field(..., ge=1, description="1-based page number.")
    width: int = Field(..., gt=0, description="Canvas width in pixels.")
    height: int = Field(..., gt=0, description="Canvas height in pixels.")
    placements: List[Placement] = Field(default_factory=list, description="Placements in pack order.")

    @model_validator(mode='after')
    def validate_bounds(self):
        for p in self.placements:
            if p.right > self.width or p.bottom > self.height:
                raise ValueError(
                    f"Record {p.record.id} at ({p.x}, {p.y}) exceeds page "
                    f"{self.width}x{self.height}"
                )
        return self

    @property
    def members(self) -> List[RectRecord]:
        return [p.record for p in self.placements]

    @property
    def used_area(self) -> int:
        return sum(p.record.area for p in self.placements)

    @property
    def fill_rate(self) -> float:
        return self.used_area / float(self.width * self.height)


# Rebuild models for forward references
RectRecord.model_rebuild()
Placement.model_rebuild()
PlacementResult.model_rebuild()
Page.model_rebuild()
