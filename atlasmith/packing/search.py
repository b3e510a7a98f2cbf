"""
Doubling search for page dimensions.

Tries canvas sizes from the configured minimum upward, doubling each axis
independently, and keeps the first size that holds the whole run. If none
does, the maximum size is used with whatever prefix of the run fits.
"""

import logging
from typing import Iterator, Sequence, Tuple

from atlasmith.schema import PackConfig, PlacementResult, RectRecord
from .placer import place_records

logger = logging.getLogger(__name__)


def doubling_sizes(minimum: int, maximum: int) -> Iterator[int]:
    """
    Yield minimum, 2*minimum, 4*minimum, ... up to maximum.

    A value past maximum is clamped to maximum and ends the sequence, so
    maximum is always the last value yielded.
    """
    size = minimum
    while True:
        if size >= maximum:
            yield maximum
            return
        yield size
        size *= 2


def search_dimensions(
    records: Sequence[RectRecord],
    config: PackConfig,
) -> Tuple[int, int, PlacementResult]:
    """
    Find the smallest doubling-sequence canvas that holds all records.

    Heights are the outer loop and widths the inner one. Every attempt places
    the full run from its first record.

    Args:
        records: Remaining records in pack order
        config: Canvas bounds

    Returns:
        Tuple of (width, height, result). When nothing fits completely this is
        (max_width, max_height) with a partial result.
    """
    width = height = 0
    result = None

    for height in doubling_sizes(config.min_height, config.max_height):
        for width in doubling_sizes(config.min_width, config.max_width):
            logger.debug(f"Attempting to generate atlas of dimensions {width}, {height}")
            result = place_records(records, width, height)
            if result.success:
                return width, height, result

    logger.debug(
        f"No size fits all {len(records)} records; "
        f"{result.placed_count} fit at {width}, {height}"
    )
    return width, height, result
