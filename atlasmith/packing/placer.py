"""
First-fit page placer.

Places an ordered run of records onto a fixed-size canvas. Each record takes
the first free top-left corner found by a row-major scan (smallest y, then
smallest x). There is no backtracking: the first record that finds no spot
ends the attempt.

Overlap uses inclusive edges, so two rectangles that merely touch are treated
as overlapping and placed records always end up at least one pixel apart.

The scan skips candidates that are provably blocked instead of stepping one
pixel at a time:
- within a row, once a placed rectangle blocks x, every x up to its right
  edge is blocked too, so the scan resumes one past that edge;
- when a whole row is blocked, the rectangles blocking it keep blocking every
  row down to the nearest of their bottom edges, so the scan resumes one past
  that edge.
Both jumps land on exactly the position the pixel-by-pixel scan would accept.
"""

from typing import List, Optional, Sequence, Tuple

from atlasmith.schema import Placement, PlacementResult, RectRecord

# (x, y, width, height)
Box = Tuple[int, int, int, int]


def rects_overlap(a: Box, b: Box) -> bool:
    """
    Inclusive axis-aligned overlap test.

    a, b are (x, y, width, height). Edge-adjacent rectangles overlap.
    """
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return not (ax > bx + bw or bx > ax + aw or ay > by + bh or by > ay + ah)


def find_position(
    width: int,
    height: int,
    canvas_width: int,
    canvas_height: int,
    placed: Sequence[Box],
) -> Optional[Tuple[int, int]]:
    """Return the first free (x, y) for a width x height rect, or None."""
    if width > canvas_width or height > canvas_height:
        return None

    y = 0
    while y + height <= canvas_height:
        row = [b for b in placed if not (y > b[1] + b[3] or b[1] > y + height)]

        x = 0
        while x + width <= canvas_width:
            blocker = None
            for b in row:
                if not (x > b[0] + b[2] or b[0] > x + width):
                    blocker = b
                    break
            if blocker is None:
                return x, y
            x = blocker[0] + blocker[2] + 1

        # An empty row always admits x=0, so row is non-empty here
        y = min(b[1] + b[3] for b in row) + 1

    return None


def place_records(
    records: Sequence[RectRecord],
    canvas_width: int,
    canvas_height: int,
) -> PlacementResult:
    """
    Place records in order onto a canvas_width x canvas_height page.

    Args:
        records: Records in pack order
        canvas_width: Page width in pixels
        canvas_height: Page height in pixels

    Returns:
        PlacementResult whose placed_count is the number of records placed
        before the first one that did not fit
    """
    placed: List[Box] = []
    placements: List[Placement] = []

    for record in records:
        pos = find_position(record.width, record.height, canvas_width, canvas_height, placed)
        if pos is None:
            return PlacementResult(
                success=False,
                placed_count=len(placements),
                placements=placements,
            )
        x, y = pos
        placed.append((x, y, record.width, record.height))
        placements.append(Placement(record=record, x=x, y=y))

    return PlacementResult(success=True, placed_count=len(placements), placements=placements)
