"""Client-side task tracker backed by a single remote JSON document."""

__version__ = "0.1.0"
