"""File discovery module."""

from .finder import find_files

__all__ = ['find_files']
