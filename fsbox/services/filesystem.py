# fsbox/services/filesystem.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

from fsbox.errors import (
    DirectoryMismatchError,
    IllegalPathError,
    TargetMissingError,
    TargetMustBeDirectoryError,
    TargetMustBeFileError,
    TypeMismatchError,
    UnrecognizedEntryError,
)
from fsbox.logging import log_operation
from fsbox.models import CreateItem, Entry, OperationResult, RenameItem, Task, TransferItem
from fsbox.services import paths
from fsbox.services.batch import BatchRunner
from fsbox.services.paths import EntryKind
from fsbox.services.storage import LocalStorage
from fsbox.services.tree import TreeOps

logger = logging.getLogger(__name__)


class FileSystemService:
    """
    Sandbox all file operations inside a single root folder.

    Every path a caller hands in is resolved against the root and rejected
    if it escapes it or names the root itself. Item lists are processed in
    order, one storage call at a time, and the first error aborts the call.
    """

    def __init__(self, root: Union[str, Path], storage: Optional[LocalStorage] = None):
        ap = paths.resolve(Path.cwd(), root)
        if paths.kind_of(ap) is EntryKind.FILE:
            raise TargetMustBeDirectoryError("The constructor can only receive the path to a folder.")
        ap.mkdir(parents=True, exist_ok=True)
        self.root = ap
        self.storage = storage or LocalStorage()
        self.tree = TreeOps(self.root, self.storage)

    # ---------- Path helpers ----------

    def to_ap(self, p: Optional[str] = None) -> Path:
        """Absolute path of `p` resolved against the root."""
        return paths.resolve(self.root, p)

    def is_legal(self, p: Optional[str] = None) -> bool:
        return paths.is_legal(self.root, self.to_ap(p))

    async def is_exist(self, p: Optional[str] = None) -> bool:
        return await self.storage.exists(self.to_ap(p))

    def _pretreat(self, p: Optional[str]) -> Path:
        return paths.pretreat(self.root, p)

    # ---------- Queries ----------

    async def browse(self, p: Optional[str] = None) -> List[Entry]:
        """List the tree under `p`, or the whole sandbox when `p` is None."""
        if p is None:
            return await self.tree.scan(self.root)
        ap = self._pretreat(p)
        if paths.kind_of(ap) is not EntryKind.DIRECTORY:
            raise TargetMustBeDirectoryError()
        if not await self.storage.exists(ap):
            raise TargetMissingError()
        return await self.tree.scan(ap)

    async def read_bytes(self, p: str) -> bytes:
        ap = self._pretreat(p)
        if paths.kind_of(ap) is not EntryKind.FILE:
            raise TargetMustBeFileError()
        if not await self.storage.exists(ap):
            raise TargetMissingError()
        return await self.storage.read_bytes(ap)

    async def read_text(self, p: str, encoding: str = "utf-8") -> str:
        return (await self.read_bytes(p)).decode(encoding)

    # ---------- Operations ----------

    async def create(self, items: Iterable[Any], overwrite: bool = False) -> OperationResult:
        log_operation(logger, "create", {"items": items, "overwrite": overwrite})
        for raw in items:
            item = CreateItem.model_validate(raw)
            ap = self._pretreat(item.path)
            if paths.kind_of(ap) is EntryKind.DIRECTORY:
                await self.tree.new_dir(ap)
            else:
                await self.tree.new_file(ap, item.content, overwrite)
        return OperationResult()

    async def copy(self, items: Iterable[Any], overwrite: bool = True) -> OperationResult:
        log_operation(logger, "copy", {"items": items, "overwrite": overwrite})
        for raw in items:
            await self._transfer(TransferItem.model_validate(raw), overwrite, move=False)
        return OperationResult()

    async def cut(self, items: Iterable[Any], overwrite: bool = True) -> OperationResult:
        log_operation(logger, "cut", {"items": items, "overwrite": overwrite})
        for raw in items:
            await self._transfer(TransferItem.model_validate(raw), overwrite, move=True)
        return OperationResult()

    async def rename(self, items: Iterable[Any]) -> OperationResult:
        log_operation(logger, "rename", {"items": items})
        for raw in items:
            item = RenameItem.model_validate(raw)
            aop = self._pretreat(item.old)
            anp = self._pretreat(item.new)
            if aop.parent != anp.parent:
                raise DirectoryMismatchError()
            await self.storage.rename(aop, anp)
        return OperationResult()

    async def remove(self, items: Iterable[str]) -> OperationResult:
        log_operation(logger, "remove", {"items": items})
        for p in items:
            ap = self._pretreat(p)
            if paths.kind_of(ap) is EntryKind.DIRECTORY:
                await self.tree.remove_tree(ap)
            else:
                await self.tree.remove_file(ap)
        return OperationResult()

    async def clear(self) -> OperationResult:
        """Remove everything inside the root, keeping the root itself."""
        log_operation(logger, "clear", {})
        for name, kind in await self.storage.list_directory(self.root):
            if kind is EntryKind.DIRECTORY:
                await self.tree.remove_tree(self.root / name)
            elif kind is EntryKind.FILE:
                await self.tree.remove_file(self.root / name)
            else:
                raise UnrecognizedEntryError(name)
        return OperationResult()

    async def bulk(self, tasks: Iterable[Union[Task, dict]]) -> OperationResult:
        return await BatchRunner(self).run(tasks)

    # ---------- Internals ----------

    async def _transfer(self, item: TransferItem, overwrite: bool, move: bool) -> None:
        asp = self._pretreat(item.src)
        adp = self._pretreat(item.dst)
        skind = paths.kind_of(asp)
        if skind is not paths.kind_of(adp):
            raise TypeMismatchError()
        if adp == asp or asp in adp.parents:
            raise IllegalPathError("Cannot copy a target onto or into itself.")

        if skind is EntryKind.DIRECTORY:
            await self.tree.copy_tree(asp, adp, overwrite)
            if move:
                await self.tree.remove_tree(asp)
        else:
            await self.tree.copy_file(asp, adp, overwrite)
            if move:
                await self.tree.remove_file(asp)
