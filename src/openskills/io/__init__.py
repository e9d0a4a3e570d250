"""Shared file I/O helpers."""

from .files import copy_skill_tree, directory_size, format_size, remove_tree, write_text_atomic

__all__ = ["copy_skill_tree", "directory_size", "format_size", "remove_tree", "write_text_atomic"]
