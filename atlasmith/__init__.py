"""
Atlasmith - Pack directories of images into power-of-two texture atlases

Merges many small textures into as few atlas pages as possible, writing each
page as an image plus a manifest of where every texture landed.
"""

__version__ = "0.1.0"

from atlasmith.builder import AtlasBuilder, BuildResult, PageOutput
from atlasmith.packing import pack, paginate
from atlasmith.schema import PackConfig, Page, RectRecord

__all__ = ["AtlasBuilder", "BuildResult", "PageOutput", "PackConfig", "Page", "RectRecord", "pack", "paginate"]
