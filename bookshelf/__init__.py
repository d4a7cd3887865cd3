"""In-memory proxy of the FakerAPI book catalogue."""

__version__ = "1.0.0"
