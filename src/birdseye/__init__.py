"""
birdseye

Top-level package for the bird's-eye fleet status service.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep this file minimal; `birdseye.fleet` must stay importable without the API stack.
