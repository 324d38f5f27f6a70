"""Convert Android string resources to and from a canonical translation store."""

__version__ = "0.1.0"
