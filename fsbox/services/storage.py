# fsbox/services/storage.py
from __future__ import annotations
import asyncio
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Tuple

from fsbox.services.paths import EntryKind


@dataclass
class LocalStorage:
    """
    Storage primitives over the local disk.

    Every call runs in a worker thread so the event loop is never blocked,
    but the caller awaits each one before issuing the next. Errors are
    plain ``OSError``s and are not translated here.
    """
    chunk_size: int = 64 * 1024

    # ---------- Queries ----------

    async def list_directory(self, ap: Path) -> List[Tuple[str, Optional[EntryKind]]]:
        return await asyncio.to_thread(self._list_directory, ap)

    async def stat(self, ap: Path) -> os.stat_result:
        return await asyncio.to_thread(os.stat, ap)

    async def exists(self, ap: Path) -> bool:
        return await asyncio.to_thread(os.path.lexists, ap)

    async def read_bytes(self, ap: Path) -> bytes:
        return await asyncio.to_thread(Path(ap).read_bytes)

    # ---------- Mutations ----------

    async def make_directories(self, ap: Path) -> None:
        await asyncio.to_thread(os.makedirs, ap, exist_ok=True)

    async def rename(self, old: Path, new: Path) -> None:
        await asyncio.to_thread(os.rename, old, new)

    async def delete_file(self, ap: Path) -> None:
        await asyncio.to_thread(os.unlink, ap)

    async def delete_directory_recursive(self, ap: Path) -> None:
        await asyncio.to_thread(shutil.rmtree, ap)

    async def copy_bytes(self, src: Path, dst: Path) -> None:
        await asyncio.to_thread(self._copy_bytes, src, dst)

    async def write_bytes(self, ap: Path, source: Any) -> None:
        await asyncio.to_thread(self._write_bytes, ap, source)

    # ---------- Internals ----------

    @staticmethod
    def _list_directory(ap: Path) -> List[Tuple[str, Optional[EntryKind]]]:
        out: List[Tuple[str, Optional[EntryKind]]] = []
        with os.scandir(ap) as it:
            for dirent in it:
                # symlinks are reported as neither file nor folder
                if dirent.is_dir(follow_symlinks=False):
                    kind = EntryKind.DIRECTORY
                elif dirent.is_file(follow_symlinks=False):
                    kind = EntryKind.FILE
                else:
                    kind = None
                out.append((dirent.name, kind))
        return out

    def _copy_bytes(self, src: Path, dst: Path) -> None:
        with open(src, "rb") as rf, open(dst, "wb") as wf:
            shutil.copyfileobj(rf, wf, self.chunk_size)

    def _write_bytes(self, ap: Path, source: Any) -> None:
        if isinstance(source, str):
            source = source.encode("utf-8")
        elif source is None:
            source = b""
        if not isinstance(source, (bytes, bytearray, memoryview)) and not hasattr(source, "read"):
            raise TypeError(f"Unsupported content source: {type(source).__name__}")

        # the target is only truncated once the stream is known to yield bytes
        head = None
        if hasattr(source, "read"):
            head = source.read(self.chunk_size)
            if not isinstance(head, (bytes, bytearray, memoryview)):
                raise TypeError(f"Content stream must yield bytes, got {type(head).__name__}")

        with open(ap, "wb") as wf:
            if head is None:
                wf.write(source)
            else:
                wf.write(head)
                shutil.copyfileobj(source, wf, self.chunk_size)
