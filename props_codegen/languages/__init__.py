"""Target language generators."""

from .cpp import PropsHeaderGenerator

__all__ = ["PropsHeaderGenerator"]
