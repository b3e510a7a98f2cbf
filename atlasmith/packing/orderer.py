"""Record ordering for large-first packing."""

from typing import Iterable, List

from atlasmith.schema import RectRecord


def order_by_area(records: Iterable[RectRecord]) -> List[RectRecord]:
    """
    Return records sorted by descending area.

    The sort is stable: records with equal area keep their input order.
    """
    return sorted(records, key=lambda r: r.area, reverse=True)
