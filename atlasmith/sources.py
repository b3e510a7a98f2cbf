"""
Source directory scanning.

Turns a directory of image files into RectRecords. Only sizes are read here;
pixels are decoded later, one page at a time, when the page is drawn.
"""

import logging
from pathlib import Path
from typing import List, Tuple, Union

from atlasmith.codec import probe_dimensions
from atlasmith.exceptions import DecodeError, SourceUnavailableError
from atlasmith.schema import RectRecord

logger = logging.getLogger(__name__)


def scan_directory(input_dir: Union[str, Path]) -> Tuple[List[RectRecord], List[str]]:
    """
    Probe every regular file in input_dir.

    Files are visited in name order. Files that are not decodable images are
    skipped with a warning rather than failing the run.

    Args:
        input_dir: Directory holding the source images

    Returns:
        Tuple of (records, skipped filenames)

    Raises:
        SourceUnavailableError: If the directory cannot be listed
    """
    directory = Path(input_dir)
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise SourceUnavailableError(f"Failed to open directory {input_dir}: {e}") from e

    records: List[RectRecord] = []
    skipped: List[str] = []

    for path in entries:
        if not path.is_file():
            continue
        try:
            width, height = probe_dimensions(path)
        except DecodeError as e:
            logger.warning(str(e))
            skipped.append(path.name)
            continue
        records.append(RectRecord(id=path.name, width=width, height=height, source=path))

    logger.info(f"Loaded {len(records)} textures from {directory} ({len(skipped)} skipped)")
    return records, skipped
