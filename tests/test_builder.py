"""
Test the AtlasBuilder end to end with real image files
"""
import pytest
from PIL import Image
from atlasmith import AtlasBuilder, BuildResult, PackConfig
from atlasmith.exceptions import (
    ConfigError,
    EncodeError,
    OversizeRecordError,
    SourceUnavailableError,
)
from atlasmith.manifest import read_manifest


def _write_png(path, size, color):
    Image.new('RGBA', size, color).save(path)


@pytest.fixture
def squares_dir(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    _write_png(src / "small.png", (100, 100), (0, 0, 255, 255))
    _write_png(src / "big.png", (300, 300), (255, 0, 0, 255))
    _write_png(src / "mid.png", (200, 200), (0, 255, 0, 255))
    return src


class TestAtlasBuilderConfig:
    """Test builder configuration"""

    def test_defaults(self):
        builder = AtlasBuilder()
        assert builder.config == PackConfig()

    def test_keyword_overrides_config(self):
        """Test that keyword dimensions override the passed config"""
        builder = AtlasBuilder(PackConfig(max_width=2048), min_width=64)
        assert builder.config.max_width == 2048
        assert builder.config.min_width == 64
        assert builder.config.max_height == 1024

    def test_invalid_minimum(self):
        with pytest.raises(ConfigError):
            AtlasBuilder(min_width=0, min_height=256)


class TestAtlasBuilderBuild:
    """Test full builds"""

    def test_single_page(self, squares_dir, tmp_path):
        """Test three squares packed onto one 512x512 page"""
        out = tmp_path / "out"
        out.mkdir()
        result = AtlasBuilder().build(squares_dir, out / "atlas.png")

        assert isinstance(result, BuildResult)
        assert result.page_count == 1
        assert result.skipped == []

        output = result.outputs[0]
        assert output.image_path == out / "atlas1.png"
        assert output.manifest_path == out / "atlas1.txt"

        with Image.open(output.image_path) as img:
            assert img.size == (512, 512)
            assert img.getpixel((0, 0)) == (255, 0, 0, 255)
            assert img.getpixel((301, 0)) == (0, 255, 0, 255)
            assert img.getpixel((301, 201)) == (0, 0, 255, 255)
            assert img.getpixel((300, 0))[3] == 0

        assert read_manifest(output.manifest_path) == [
            ("big.png", 0, 0),
            ("mid.png", 301, 0),
            ("small.png", 301, 201),
        ]

    def test_multiple_pages(self, tmp_path):
        """Test that overflowing records go to numbered pages"""
        src = tmp_path / "src"
        src.mkdir()
        for name in ("a.png", "b.png", "c.png"):
            _write_png(src / name, (40, 40), (10, 20, 30, 255))

        builder = AtlasBuilder(max_width=64, max_height=64, min_width=16, min_height=16)
        result = builder.build(src, tmp_path / "atlas.png")

        assert result.page_count == 3
        assert [p.number for p in result.pages] == [1, 2, 3]
        for n in (1, 2, 3):
            assert (tmp_path / f"atlas{n}.png").exists()
            assert (tmp_path / f"atlas{n}.txt").exists()
        ids = [entry[0] for n in (1, 2, 3) for entry in read_manifest(tmp_path / f"atlas{n}.txt")]
        assert sorted(ids) == ["a.png", "b.png", "c.png"]

    def test_empty_directory(self, tmp_path):
        """Test that an empty directory completes with no pages"""
        src = tmp_path / "src"
        src.mkdir()
        result = AtlasBuilder().build(src, tmp_path / "atlas.png")
        assert result.page_count == 0
        assert not (tmp_path / "atlas1.png").exists()

    def test_skipped_files_reported(self, squares_dir, tmp_path):
        (squares_dir / "readme.txt").write_text("not an image")
        result = AtlasBuilder().build(squares_dir, tmp_path / "atlas.png")
        assert result.skipped == ["readme.txt"]
        assert result.page_count == 1

    def test_oversize_writes_nothing(self, squares_dir, tmp_path):
        """Test that an oversize image aborts before any page is written"""
        builder = AtlasBuilder(max_width=256, max_height=256)
        with pytest.raises(OversizeRecordError):
            builder.build(squares_dir, tmp_path / "atlas.png")
        assert list(tmp_path.glob("atlas*")) == []

    def test_missing_source_directory(self, tmp_path):
        with pytest.raises(SourceUnavailableError):
            AtlasBuilder().build(tmp_path / "nope", tmp_path / "atlas.png")

    def test_output_name_without_extension(self, squares_dir, tmp_path):
        with pytest.raises(ConfigError):
            AtlasBuilder().build(squares_dir, tmp_path / "atlas")

    def test_unwritable_output(self, squares_dir, tmp_path):
        """Test that a page that cannot be saved raises EncodeError with the path"""
        target = tmp_path / "missing" / "atlas.png"
        with pytest.raises(EncodeError) as exc:
            AtlasBuilder().build(squares_dir, target)
        assert exc.value.path == tmp_path / "missing" / "atlas1.png"
