"""Custom exceptions for atlas building"""


class AtlasError(Exception):
    """Base exception for atlas errors"""
    pass


class ConfigError(AtlasError):
    """Invalid dimensions or output name"""
    pass


class SourceUnavailableError(AtlasError):
    """Input directory cannot be opened"""
    pass


class DecodeError(AtlasError):
    """A file is not a decodable image"""
    pass


class OversizeRecordError(AtlasError):
    """A record is larger than the maximum canvas"""

    def __init__(self, record, max_width: int, max_height: int):
        self.record = record
        self.max_width = max_width
        self.max_height = max_height
        super().__init__(
            f"Texture {record.id} ({record.width}, {record.height}) too big for atlas "
            f"({max_width}, {max_height})"
        )


class EncodeError(AtlasError):
    """Writing a page image or manifest failed"""

    def __init__(self, path, message: str = "Unable to write"):
        self.path = path
        super().__init__(f"{message} {path}")


class PackingError(AtlasError):
    """The packer stopped making progress"""
    pass
