"""Scene file parsing, 3D vector arithmetic and supporting helpers for a small ray tracer."""

__version__ = "0.1.0"
__all__ = ["__version__"]