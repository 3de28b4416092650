"""printf-style formatting with C 32-bit conversions, field widths, precision and flags."""

__version__ = "0.1.0"
__all__ = ["conversions", "formatter", "numbers", "padding"]