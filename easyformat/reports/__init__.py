"""Report generation modules for easyformat."""

from .showcase import ShowcaseGenerator, SECTIONS

__all__ = ['ShowcaseGenerator', 'SECTIONS']
