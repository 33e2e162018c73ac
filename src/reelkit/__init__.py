"""reelkit - naming and timeline planning for editorial batch scripts."""

__version__ = "0.1.0"
