"""
Multi-page atlas pager.

Splits a record set into pages. Records are ordered once (largest area
first); each page then takes the longest prefix of the remaining records that
the dimension search can place, so every page holds a contiguous run of the
ordered sequence.
"""

import logging
from typing import Iterator, List, Sequence

from atlasmith.exceptions import OversizeRecordError, PackingError
from atlasmith.schema import PackConfig, Page, RectRecord
from .orderer import order_by_area
from .search import search_dimensions

logger = logging.getLogger(__name__)


def validate_records(records: Sequence[RectRecord], config: PackConfig) -> None:
    """
    Reject records that no page could ever hold.

    Raises:
        OversizeRecordError: For the first record wider than max_width or
            taller than max_height
    """
    for record in records:
        if record.width > config.max_width or record.height > config.max_height:
            raise OversizeRecordError(record, config.max_width, config.max_height)


def paginate(records: Sequence[RectRecord], config: PackConfig) -> Iterator[Page]:
    """
    Yield pages one at a time until every record is placed.

    Validation happens before the first page is yielded, so an oversize
    record aborts the run with no pages. Pages are produced lazily; a caller
    can write each one out before the next search starts.

    Raises:
        OversizeRecordError: If any record exceeds the maximum canvas
        PackingError: If a search places nothing (cannot happen for
            validated input)
    """
    validate_records(records, config)

    ordered = order_by_area(records)
    total = len(ordered)
    start = 0
    number = 1

    while start < total:
        remaining = ordered[start:]
        logger.info(f"Generating atlas {number} from {len(remaining)} remaining textures")

        width, height, result = search_dimensions(remaining, config)
        if result.placed_count == 0:
            raise PackingError(
                f"No texture could be placed on atlas {number} ({width}, {height})"
            )

        page = Page(number=number, width=width, height=height, placements=result.placements)
        logger.info(
            f"Atlas {number} {'complete' if result.success else 'full'}: "
            f"{result.placed_count} textures at {width}x{height}"
        )
        yield page

        start += result.placed_count
        number += 1


def pack(records: Sequence[RectRecord], config: PackConfig) -> List[Page]:
    """Pack all records and return the full list of pages."""
    return list(paginate(records, config))
