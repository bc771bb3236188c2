"""Directory file-type statistics and previews of file groupings by type, size and time."""

__version__ = "0.1.0"