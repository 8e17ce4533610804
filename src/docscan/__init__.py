"""DocScan: group invoice files by the fields encoded in their names."""

__version__ = "1.0.0"
