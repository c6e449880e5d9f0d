"""Parsing, validation and normalization of GitHub repository references."""

__version__ = "0.1.0"
__all__ = ["url_parser"]