"""Loading of profile / rule documents and writing of the converted profile."""

from .documents import load_policy, load_profile, parse_policy, parse_profile
from .file_loader import FileLoader
from .writer import ProfileWriter

__all__ = [
    "FileLoader",
    "ProfileWriter",
    "load_policy",
    "load_profile",
    "parse_policy",
    "parse_profile",
]
