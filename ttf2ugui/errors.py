class ConversionError(Exception):
    """Base class for everything that aborts a conversion run."""
    exit_code = 1


class ConfigError(ConversionError):
    """Missing or invalid command line options."""


class SourceError(ConversionError):
    """Font file unreadable, size rejected or a glyph could not be rendered."""


class CellOverflowError(SourceError):
    """A rendered glyph does not fit the cell computed by the sizing pass."""


class OutputError(ConversionError):
    """An output file could not be written."""
    exit_code = 2
