"""Record keeping service for a construction-management office."""

__version__ = "0.1.0"
