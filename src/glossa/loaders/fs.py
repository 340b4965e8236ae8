"""
File-system dictionary loaders.

Reads user-authored dictionaries (JSON or YAML) either from a flat
directory, keyed by file name, or from a content-collection tree.
Results are returned as a SourceResult so a missing source can be
told apart from a broken one without catching exceptions.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path, PurePosixPath
from typing import Any, Iterable

import yaml
from pydantic import TypeAdapter, ValidationError

from glossa.exceptions import SourceReadError

logger = logging.getLogger(__name__)

DICTIONARY_EXTENSIONS = (".json", ".yaml", ".yml")

# Anything but letters, digits, "-", "_" and whitespace
UNSAFE_SLUG_CHARS = re.compile(r"[^\w\s-]")

_dictionary_adapter = TypeAdapter(dict[str, str | None])


class SourceStatus(Enum):
    """Outcome of reading a dictionary source."""

    ABSENT = auto()
    LOADED = auto()
    FAILED = auto()


@dataclass(frozen=True)
class SourceResult:
    """Dictionaries read from a source, or why none were."""

    status: SourceStatus
    location: str = ""
    dictionaries: dict[str, dict[str, str | None]] = field(default_factory=dict)
    error: str = ""

    @classmethod
    def absent(cls, location: str) -> "SourceResult":
        """The source does not exist."""
        return cls(status=SourceStatus.ABSENT, location=location)

    @classmethod
    def loaded(
        cls, location: str, dictionaries: dict[str, dict[str, str | None]]
    ) -> "SourceResult":
        """The source was read successfully."""
        return cls(status=SourceStatus.LOADED, location=location, dictionaries=dictionaries)

    @classmethod
    def failed(cls, location: str, error: str) -> "SourceResult":
        """The source exists but could not be read."""
        return cls(status=SourceStatus.FAILED, location=location, error=error)

    @property
    def ok(self) -> bool:
        """True unless the source failed."""
        return self.status is not SourceStatus.FAILED

    def unwrap(self) -> dict[str, dict[str, str | None]]:
        """
        Get the dictionaries, empty when the source is absent.

        Raises:
            SourceReadError: If the source failed to load
        """
        if self.status is SourceStatus.FAILED:
            raise SourceReadError(self.error, details={"location": self.location})
        return self.dictionaries


@dataclass(frozen=True)
class CollectionEntry:
    """One data entry of a content collection."""

    id: str
    data: dict[str, Any]
    file_path: str | None = None


def parse_dictionary(path: Path) -> dict[str, str | None]:
    """
    Parse one JSON or YAML dictionary file.

    Raises:
        OSError: If the file cannot be read
        ValueError: If the content is malformed or not a string mapping
    """
    content = path.read_text(encoding="utf-8")
    if path.suffix == ".json":
        data = json.loads(content)
    else:
        data = yaml.safe_load(content)

    if data is None:
        return {}

    try:
        return _dictionary_adapter.validate_python(data)
    except ValidationError as e:
        raise ValueError(f"not a mapping of strings: {e}") from e


def _read_files(location: Path, files: Iterable[tuple[str, Path]]) -> SourceResult:
    dictionaries: dict[str, dict[str, str | None]] = {}
    for key, path in files:
        try:
            dictionaries[key] = parse_dictionary(path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            # json.JSONDecodeError is a ValueError
            logger.error(f"Failed to read dictionary {path}: {e}")
            return SourceResult.failed(str(location), f"Failed to read dictionary {path}: {e}")
        logger.debug(f"Loaded {len(dictionaries[key])} keys for {key} from {path}")
    return SourceResult.loaded(str(location), dictionaries)


def read_dictionary_dir(directory: Path | str) -> SourceResult:
    """
    Read every dictionary file at the top level of a directory.

    Keys are the file names without extension. Files with other
    extensions are ignored.

    Args:
        directory: Directory such as src/content/i18n

    Returns:
        ABSENT if the directory does not exist, FAILED on any read or
        parse error, LOADED otherwise
    """
    directory = Path(directory)
    if not directory.exists():
        logger.debug(f"Dictionary directory not found: {directory}")
        return SourceResult.absent(str(directory))
    if not directory.is_dir():
        return SourceResult.failed(str(directory), f"Not a directory: {directory}")

    try:
        files = sorted(
            (path.stem, path)
            for path in directory.iterdir()
            if path.is_file() and path.suffix in DICTIONARY_EXTENSIONS
        )
    except OSError as e:
        return SourceResult.failed(str(directory), f"Failed to list {directory}: {e}")

    return _read_files(directory, files)


def slugify(segment: str) -> str:
    """Lower-case a path segment, drop punctuation and hyphenate whitespace."""
    slug = UNSAFE_SLUG_CHARS.sub("", segment.strip().lower())
    return re.sub(r"\s+", "-", slug)


def collection_id(root: Path, path: Path, legacy: bool = False) -> str:
    """
    Entry id of a collection file.

    The path relative to the collection root, without extension and
    with POSIX separators. Legacy ids slug every segment.
    """
    entry_id = path.relative_to(root).with_suffix("").as_posix()
    if legacy:
        return "/".join(slugify(segment) for segment in entry_id.split("/"))
    return entry_id


def read_collection(root: Path | str, legacy_ids: bool = False) -> SourceResult:
    """
    Read a content collection of dictionaries.

    Walks the tree below root, skipping files whose name starts
    with an underscore.

    Args:
        root: Collection directory
        legacy_ids: Slug entry ids (lower-cased, punctuation removed)

    Returns:
        ABSENT if root does not exist, FAILED on any read or parse
        error, LOADED otherwise
    """
    root = Path(root)
    if not root.is_dir():
        logger.debug(f"Collection not found: {root}")
        return SourceResult.absent(str(root))

    try:
        files = sorted(
            (collection_id(root, path, legacy_ids), path)
            for path in root.rglob("*")
            if path.is_file()
            and path.suffix in DICTIONARY_EXTENSIONS
            and not path.name.startswith("_")
        )
    except OSError as e:
        return SourceResult.failed(str(root), f"Failed to walk {root}: {e}")

    return _read_files(root, files)


def dictionaries_from_entries(
    entries: Iterable[CollectionEntry],
    collection_root: str = "",
    legacy: bool = False,
) -> dict[str, dict[str, Any]]:
    """
    Key collection entries by language tag.

    The tag is the entry id for legacy collections or entries without
    a file path; otherwise it is the file path with the collection
    root, the leading slash and the extension removed.

    Example:
        entry = CollectionEntry("fr", {...}, "src/content/i18n/fr.json")
        dictionaries_from_entries([entry], "src/content/i18n/")  # {"fr": {...}}
    """
    result: dict[str, dict[str, Any]] = {}
    for entry in entries:
        if legacy or not entry.file_path:
            lang = entry.id
        else:
            path = entry.file_path.replace(collection_root, "", 1).lstrip("/")
            stem = PurePosixPath(path)
            lang = str(stem.with_suffix("")) if stem.suffix else path
        result[lang] = entry.data
    return result
