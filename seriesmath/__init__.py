"""Elementary math functions: series-based trigonometry and truncation rounding."""

__version__ = "0.1.0"
__all__ = ["rounding", "trig"]