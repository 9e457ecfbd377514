"""
Loader module for the Student Directory application.

Fetches the remote collection and tracks the load lifecycle.
"""

from student_directory.loader.client import CollectionClient
from student_directory.loader.directory_loader import DirectoryLoader, RecordSource
from student_directory.loader.errors import (
    DecodeError,
    HttpStatusError,
    LoadError,
    NetworkError,
)

__all__ = [
    "CollectionClient",
    "DecodeError",
    "DirectoryLoader",
    "HttpStatusError",
    "LoadError",
    "NetworkError",
    "RecordSource",
]
