# fsbox/services/paths.py
"""
Sandbox boundary checks and the path-shape classifier.

Paths are normalized lexically; symlinks are not followed. The kind of an
operation target (file or folder) is decided from its name alone: a trailing
extension means file, anything else means folder. An extensionless file is
therefore always treated as a folder.
"""
from __future__ import annotations
import enum
import os
from pathlib import Path
from typing import Optional, Union

from fsbox.errors import IllegalPathError

PathLike = Union[str, "os.PathLike[str]"]


class EntryKind(str, enum.Enum):
    FILE = "file"
    DIRECTORY = "directory"


def resolve(root: Path, p: Optional[PathLike] = None) -> Path:
    if p is None:
        return Path(root)
    # joining onto an absolute p discards root
    return Path(os.path.normpath(os.path.join(root, p)))


def is_legal(root: Path, ap: Path) -> bool:
    # the root itself is never an operation target
    return ap != root and root in ap.parents


def pretreat(root: Path, p: Optional[PathLike]) -> Path:
    ap = resolve(root, p)
    if not is_legal(root, ap):
        raise IllegalPathError()
    return ap


def kind_of(ap: PathLike) -> EntryKind:
    _, ext = os.path.splitext(os.path.basename(os.fspath(ap)))
    return EntryKind.FILE if ext else EntryKind.DIRECTORY
