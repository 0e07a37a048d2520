"""Keep a Changelog document model, parser and serializer."""

from .model import UNRELEASED, Category, ChangeKind, Content, Release
from .parser import parse
from .serializer import stringify

__all__ = [
    "UNRELEASED",
    "Category",
    "ChangeKind",
    "Content",
    "Release",
    "parse",
    "stringify",
]
