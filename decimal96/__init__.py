"""A 96-bit decimal number type with banker's rounding and overflow errors."""

__version__ = "0.1.0"

__all__ = ["arithmetic", "comparison", "convert", "core", "rounding"]