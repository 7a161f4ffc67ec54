"""SchedGraph version metadata."""

__version__ = "0.3.0"
