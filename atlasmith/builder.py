"""
Core Atlasmith builder API

Provides the AtlasBuilder class that scans a source directory, packs the images
into pages and writes each page image plus its manifest, and the BuildResult
class describing what was written.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Union

from atlasmith.codec import allocate_canvas, load_image, paste, save_image
from atlasmith.exceptions import EncodeError
from atlasmith.manifest import page_output_paths, write_manifest
from atlasmith.packing import paginate
from atlasmith.schema import PackConfig, Page, RectRecord, make_config
from atlasmith.sources import scan_directory

logger = logging.getLogger(__name__)


@dataclass
class PageOutput:
    """
    Files written for one page.

    Attributes:
        page: The packed page
        image_path: Atlas image file
        manifest_path: Manifest text file
    """
    page: Page
    image_path: Path
    manifest_path: Path


@dataclass
class BuildResult:
    """
    Outcome of a full atlas build.

    Attributes:
        outputs: One entry per page, in page order
        skipped: Source filenames that could not be decoded
    """
    outputs: List[PageOutput] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    @property
    def pages(self) -> List[Page]:
        return [o.page for o in self.outputs]

    @property
    def page_count(self) -> int:
        return len(self.outputs)


class AtlasBuilder:
    """
    Packs a directory of images into power-of-two atlas pages.

    Examples:
        Basic usage:
        >>> builder = AtlasBuilder()
        >>> result = builder.build("textures/", "out/atlas.png")
        >>> print(result.page_count)

        Custom bounds:
        >>> builder = AtlasBuilder(max_width=2048, max_height=2048, min_width=64, min_height=64)
    """

    def __init__(
        self,
        config: Optional[PackConfig] = None,
        *,
        min_width: Optional[int] = None,
        min_height: Optional[int] = None,
        max_width: Optional[int] = None,
        max_height: Optional[int] = None,
    ):
        """
        Initialize the builder.

        Args:
            config: Full configuration. Keyword dimensions override its values.
            min_width, min_height: First canvas size tried (default 256)
            max_width, max_height: Largest canvas size (default 1024)

        Raises:
            ConfigError: If any dimension is not a positive integer
        """
        base = config.model_dump() if config is not None else {}
        base.update({
            k: v for k, v in dict(
                min_width=min_width,
                min_height=min_height,
                max_width=max_width,
                max_height=max_height,
            ).items() if v is not None
        })
        self.config = make_config(**base)

    def scan(self, input_dir: Union[str, Path]):
        """Read record sizes from input_dir. Returns (records, skipped)."""
        return scan_directory(input_dir)

    def write_pages(
        self,
        records: Sequence[RectRecord],
        output_name: Union[str, Path],
    ) -> Iterator[PageOutput]:
        """
        Pack records and write each page as soon as it is packed.

        Pages already written stay on disk if a later page fails.

        Raises:
            ConfigError: If output_name has no extension
            OversizeRecordError: If a record exceeds the maximum canvas
            EncodeError: If a page image or manifest cannot be written
        """
        # Fail on a bad output name before any packing work
        page_output_paths(output_name, 1)

        for page in paginate(records, self.config):
            yield self.write_page(page, output_name)

    def write_page(self, page: Page, output_name: Union[str, Path]) -> PageOutput:
        """Draw one page and write its image and manifest."""
        image_path, manifest_path = page_output_paths(output_name, page.number)
        logger.info(f"Creating output texture for atlas {image_path}")

        canvas = allocate_canvas(page.width, page.height)
        try:
            for placement in page.placements:
                source = placement.record.source
                if source is None:
                    continue
                with load_image(source) as img:
                    paste(canvas, img, placement.x, placement.y)

            logger.info(f"Writing texture atlas to {image_path}")
            if not save_image(canvas, image_path, self.config.output_format):
                raise EncodeError(image_path, "Unable to create atlas image")
        finally:
            canvas.close()

        write_manifest(page, manifest_path)
        return PageOutput(page=page, image_path=image_path, manifest_path=manifest_path)

    def build(self, input_dir: Union[str, Path], output_name: Union[str, Path]) -> BuildResult:
        """
        Scan input_dir and write every atlas page for it.

        Args:
            input_dir: Directory holding the source images
            output_name: Base output file name with extension (e.g. "atlas.png")

        Returns:
            BuildResult listing the written pages and skipped files. An empty
            directory gives a result with no pages.

        Raises:
            ConfigError: If output_name has no extension
            SourceUnavailableError: If input_dir cannot be read
            OversizeRecordError: If an image exceeds the maximum canvas
            EncodeError: If a page cannot be written
        """
        page_output_paths(output_name, 1)

        records, skipped = self.scan(input_dir)
        result = BuildResult(skipped=skipped)

        logger.info(f"Generating atlases from {len(records)} textures")
        for output in self.write_pages(records, output_name):
            result.outputs.append(output)

        logger.info(f"Wrote {result.page_count} atlas page(s) for {len(records)} textures")
        return result
