"""Skeleton catalog, pattern resolution and the Formatter."""

from .skeletons import SKELETONS, Skeleton, get_skeleton
from .pattern_service import PatternService
from .formatter import Formatter

__all__ = ['SKELETONS', 'Skeleton', 'get_skeleton', 'PatternService', 'Formatter']
