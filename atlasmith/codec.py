"""
Image codec backed by Pillow.

The packer never looks at pixels. This module is the only place that decodes
source images, builds page canvases and encodes them back to files.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Tuple, Union

from PIL import Image, UnidentifiedImageError

from atlasmith.exceptions import DecodeError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_CANVAS_MODES = {
    32: 'RGBA',
    24: 'RGB',
}


@contextmanager
def _size_limit_lifted() -> Iterator[None]:
    # Header reads never allocate pixels, so the bomb limit only applies to loads
    limit = Image.MAX_IMAGE_PIXELS
    Image.MAX_IMAGE_PIXELS = None
    try:
        yield
    finally:
        Image.MAX_IMAGE_PIXELS = limit


def probe_dimensions(path: PathLike) -> Tuple[int, int]:
    """
    Read an image's size without decoding its pixels.

    Images above Pillow's decompression bomb limit still report their real
    size here, so the packer can reject them as oversize.

    Raises:
        DecodeError: If the file is not a recognized image
    """
    try:
        with _size_limit_lifted(), Image.open(path) as img:
            return img.size
    except (UnidentifiedImageError, OSError) as e:
        raise DecodeError(f"Failed to determine type of image {path}: {e}") from e


@contextmanager
def load_image(path: PathLike) -> Iterator[Image.Image]:
    """
    Decode an image as RGBA for the duration of a with-block.

    The decoded buffers are closed when the block exits, including on errors.

    Raises:
        DecodeError: If the file cannot be decoded or exceeds Pillow's
            decompression bomb limit
    """
    try:
        img = Image.open(path)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise DecodeError(f"Unable to load image {path}: {e}") from e

    try:
        img.load()
        rgba = img if img.mode == 'RGBA' else img.convert('RGBA')
    except (OSError, SyntaxError, ValueError) as e:
        img.close()
        raise DecodeError(f"Unable to load image {path}: {e}") from e

    try:
        yield rgba
    finally:
        if rgba is not img:
            rgba.close()
        img.close()


def allocate_canvas(width: int, height: int, bits_per_pixel: int = 32) -> Image.Image:
    """Create a blank, fully transparent (or black for 24 bpp) canvas."""
    mode = _CANVAS_MODES.get(bits_per_pixel)
    if mode is None:
        raise ValueError(f"Unsupported bits per pixel: {bits_per_pixel}")
    return Image.new(mode, (width, height), (0, 0, 0, 0) if mode == 'RGBA' else (0, 0, 0))


def paste(dst: Image.Image, src: Image.Image, x: int, y: int, opacity: int = 255) -> None:
    """
    Alpha-composite src onto dst with its top-left corner at (x, y).

    opacity (0-255) scales the source alpha. The caller keeps src inside dst.
    """
    if src.mode != 'RGBA':
        src = src.convert('RGBA')
    if opacity < 255:
        src = src.copy()
        alpha = src.getchannel('A').point(lambda a: a * opacity // 255)
        src.putalpha(alpha)

    if dst.mode == 'RGBA':
        dst.alpha_composite(src, dest=(x, y))
    else:
        dst.paste(src, (x, y), src)


def save_image(image: Image.Image, path: PathLike, image_format: str = 'PNG') -> bool:
    """
    Encode image to path in the given Pillow format.

    Returns:
        True on success, False if the file could not be written
    """
    try:
        image.save(path, format=image_format)
    except (OSError, ValueError, KeyError) as e:
        logger.error(f"Unable to save image {path}: {e}")
        return False
    return True
