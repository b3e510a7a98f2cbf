"""
Page output naming and manifest files.

Each page N of an output name like `atlas.png` is written as `atlas<N>.png`
with a manifest `atlas<N>.txt` next to it. The manifest has one line per
placed record, in placement order:

    "<record-id>" <x> <y>
"""

import logging
import re
from pathlib import Path
from typing import List, Tuple, Union

from atlasmith.exceptions import ConfigError, EncodeError
from atlasmith.schema import Page

logger = logging.getLogger(__name__)

MANIFEST_SUFFIX = '.txt'

_LINE_RE = re.compile(r'^"(?P<id>.*)" (?P<x>\d+) (?P<y>\d+)$')


def page_output_paths(output_name: Union[str, Path], page_number: int) -> Tuple[Path, Path]:
    """
    Return (image_path, manifest_path) for a 1-based page number.

    The page number goes between the stem and the final extension:
    `out/atlas.png`, page 2 -> `out/atlas2.png`, `out/atlas2.txt`.

    Raises:
        ConfigError: If output_name has no extension
    """
    path = Path(output_name)
    suffix = path.suffix
    if not suffix:
        raise ConfigError(f"Output name must have a file extension: {output_name}")

    base = f"{path.stem}{page_number}"
    return path.with_name(base + suffix), path.with_name(base + MANIFEST_SUFFIX)


def format_manifest(page: Page) -> str:
    """Render a page's manifest text."""
    return "".join(f'"{p.record.id}" {p.x} {p.y}\n' for p in page.placements)


def write_manifest(page: Page, path: Union[str, Path]) -> None:
    """
    Write a page's manifest file.

    Raises:
        EncodeError: If the file cannot be written
    """
    try:
        with open(path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(format_manifest(page))
    except OSError as e:
        raise EncodeError(path, f"Unable to write manifest ({e})") from e
    logger.debug(f"Wrote manifest {path} ({len(page.placements)} entries)")


def read_manifest(path: Union[str, Path]) -> List[Tuple[str, int, int]]:
    """
    Parse a manifest file into (id, x, y) tuples.

    Raises:
        ValueError: On a malformed line
    """
    entries = []
    with open(path, 'r', encoding='utf-8') as f:
        for lineno, line in enumerate(f, start=1):
            line = line.rstrip('\r\n')
            if not line:
                continue
            match = _LINE_RE.match(line)
            if match is None:
                raise ValueError(f"{path}:{lineno}: malformed manifest line: {line!r}")
            entries.append((match.group('id'), int(match.group('x')), int(match.group('y'))))
    return entries
