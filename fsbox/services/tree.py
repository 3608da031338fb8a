# fsbox/services/tree.py
"""
Recursive tree algorithms: scan, copy and remove.

Children are handled one at a time, depth-first. Nothing here is
transactional: the first failure propagates and leaves whatever was already
copied or removed in place.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, List

from fsbox.errors import AlreadyExistsError, UnrecognizedEntryError
from fsbox.models import Entry
from fsbox.services.paths import EntryKind
from fsbox.services.storage import LocalStorage

logger = logging.getLogger(__name__)


class TreeOps:
    def __init__(self, root: Path, storage: LocalStorage):
        self.root = root
        self.storage = storage

    async def scan(self, ap: Path) -> List[Entry]:
        res: List[Entry] = []
        for name, kind in await self.storage.list_directory(ap):
            child = ap / name
            rel = str(child.relative_to(self.root))
            if kind is EntryKind.DIRECTORY:
                res.append(Entry(name=name, path=rel, is_dir=True, children=await self.scan(child)))
            elif kind is EntryKind.FILE:
                st = await self.storage.stat(child)
                res.append(Entry(name=name, path=rel, is_dir=False, size=st.st_size))
            else:
                raise UnrecognizedEntryError(rel)
        return res

    async def new_dir(self, ap: Path) -> None:
        await self.storage.make_directories(ap)

    async def new_file(self, ap: Path, content: Any, overwrite: bool) -> None:
        await self.storage.make_directories(ap.parent)
        await self._check_overwrite(ap, overwrite)
        await self.storage.write_bytes(ap, content)

    async def copy_file(self, src: Path, dst: Path, overwrite: bool) -> None:
        await self.storage.make_directories(dst.parent)
        await self._check_overwrite(dst, overwrite)
        await self.storage.copy_bytes(src, dst)

    async def copy_tree(self, src: Path, dst: Path, overwrite: bool) -> None:
        # an existing destination folder is merged into, never truncated
        await self.storage.make_directories(dst)
        for name, kind in await self.storage.list_directory(src):
            if kind is EntryKind.DIRECTORY:
                await self.copy_tree(src / name, dst / name, overwrite)
            elif kind is EntryKind.FILE:
                await self.copy_file(src / name, dst / name, overwrite)
            else:
                raise UnrecognizedEntryError(str((src / name).relative_to(self.root)))

    async def remove_tree(self, ap: Path) -> None:
        await self.storage.delete_directory_recursive(ap)

    async def remove_file(self, ap: Path) -> None:
        await self.storage.delete_file(ap)

    async def _check_overwrite(self, ap: Path, overwrite: bool) -> None:
        if await self.storage.exists(ap):
            if not overwrite:
                raise AlreadyExistsError()
            logger.debug("overwriting %s", ap)
