"""Logging setup, look-up-table frame conversion and JSON configuration helpers."""

__version__ = "0.1.0"
__all__ = ["baselog", "frame_converter", "json_wrapper"]