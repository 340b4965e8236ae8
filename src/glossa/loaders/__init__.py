"""Producers of raw user dictionaries."""

from glossa.loaders.fs import (
    CollectionEntry,
    SourceResult,
    SourceStatus,
    dictionaries_from_entries,
    read_collection,
    read_dictionary_dir,
)

__all__ = [
    "CollectionEntry",
    "SourceResult",
    "SourceStatus",
    "dictionaries_from_entries",
    "read_collection",
    "read_dictionary_dir",
]
