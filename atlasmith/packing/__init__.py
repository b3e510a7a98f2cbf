"""
Multi-page rectangle packing.

Orders records largest first, searches power-of-two page sizes and places
records with a first-fit scan, spilling onto new pages as needed.
"""
from .orderer import order_by_area
from .placer import rects_overlap, find_position, place_records
from .search import doubling_sizes, search_dimensions
from .pager import validate_records, paginate, pack

__all__ = [
    'order_by_area',
    'rects_overlap',
    'find_position',
    'place_records',
    'doubling_sizes',
    'search_dimensions',
    'validate_records',
    'paginate',
    'pack',
]
