"""Text-defined bitmap fonts and string rendering into in-memory pixel images."""

__version__ = "0.1.0"

__all__ = ["numparse", "cformat", "font", "image", "render"]