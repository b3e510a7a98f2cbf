"""
Test source directory scanning and configuration
"""
import pytest
from PIL import Image
from atlasmith.exceptions import ConfigError, SourceUnavailableError
from atlasmith.schema import PackConfig, make_config
from atlasmith.sources import scan_directory


class TestScanDirectory:
    """Test turning a directory into records"""

    def test_reads_images_in_name_order(self, tmp_path):
        Image.new('RGBA', (30, 20)).save(tmp_path / "b.png")
        Image.new('RGB', (10, 40)).save(tmp_path / "a.bmp")

        records, skipped = scan_directory(tmp_path)

        assert [r.id for r in records] == ["a.bmp", "b.png"]
        assert (records[0].width, records[0].height) == (10, 40)
        assert records[1].source == tmp_path / "b.png"
        assert skipped == []

    def test_skips_undecodable_files(self, tmp_path, caplog):
        """Test that non-images are skipped with a warning"""
        Image.new('RGBA', (8, 8)).save(tmp_path / "ok.png")
        (tmp_path / "notes.txt").write_text("hello")
        (tmp_path / "subdir").mkdir()

        with caplog.at_level("WARNING", logger="atlasmith"):
            records, skipped = scan_directory(tmp_path)

        assert [r.id for r in records] == ["ok.png"]
        assert skipped == ["notes.txt"]
        assert "notes.txt" in caplog.text

    def test_empty_directory(self, tmp_path):
        assert scan_directory(tmp_path) == ([], [])

    def test_missing_directory(self, tmp_path):
        with pytest.raises(SourceUnavailableError):
            scan_directory(tmp_path / "nope")

    def test_image_past_bomb_limit_keeps_size(self, huge_png):
        """Test that a very large image becomes a record instead of a crash"""
        limit = Image.MAX_IMAGE_PIXELS
        records, skipped = scan_directory(huge_png.parent)

        assert [(r.id, r.width, r.height) for r in records] == [("huge.png", 20000, 20000)]
        assert skipped == []
        assert Image.MAX_IMAGE_PIXELS == limit


class TestConfig:
    """Test packing configuration"""

    def test_defaults(self):
        config = PackConfig()
        assert (config.min_width, config.min_height) == (256, 256)
        assert (config.max_width, config.max_height) == (1024, 1024)
        assert config.output_format == 'PNG'

    def test_none_overrides_ignored(self):
        config = make_config(max_width=2048, min_width=None)
        assert config.max_width == 2048
        assert config.min_width == 256

    @pytest.mark.parametrize("field", ["min_width", "min_height", "max_width", "max_height"])
    def test_non_positive_rejected(self, field):
        """Test that zero or negative dimensions raise ConfigError"""
        with pytest.raises(ConfigError) as exc:
            make_config(**{field: 0})
        assert field in str(exc.value)
        with pytest.raises(ConfigError):
            make_config(**{field: -4})
