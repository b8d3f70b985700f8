"""Process-level wiring."""

from .wiring import provide_pipeline

__all__ = ["provide_pipeline"]
