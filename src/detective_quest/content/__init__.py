"""Static mansion content."""

from .loader import load_content, parse_content

__all__ = [
    "load_content",
    "parse_content",
]
