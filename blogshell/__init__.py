"""Page shell composition and lead capture for the tutorial blog."""

__version__ = "0.1.0"
