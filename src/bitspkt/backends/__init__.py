"""Backends for packet tree output (DOT, text)."""

from .dot_generator import DotMode, format_expression, generate_dot, save_dot_file

__all__ = ["DotMode", "format_expression", "generate_dot", "save_dot_file"]
