# fsbox_mcp/tools/files.py
from __future__ import annotations
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field
from fastmcp import FastMCP

from fsbox.services.filesystem import FileSystemService


class FsBrowseIn(BaseModel):
    path: Optional[str] = Field(None, description="Folder under sandbox root; omit to list the whole sandbox")


class FsReadIn(BaseModel):
    path: str = Field(..., description="Relative path of a file under sandbox root")


class FsCreateItemIn(BaseModel):
    path: str = Field(..., description="Relative path; extensionless paths are created as folders")
    content: Optional[str] = Field(None, description="UTF-8 text content for files")


class FsCreateIn(BaseModel):
    items: List[FsCreateItemIn]
    overwrite: bool = Field(False, description="Replace files that already exist")


class FsTransferItemIn(BaseModel):
    src: str = Field(..., description="Source path under sandbox root")
    dst: str = Field(..., description="Destination path under sandbox root")


class FsTransferIn(BaseModel):
    items: List[FsTransferItemIn]
    overwrite: bool = Field(True, description="Replace files that already exist")


class FsRenameItemIn(BaseModel):
    old: str = Field(..., description="Current path")
    new: str = Field(..., description="New path in the same folder")


class FsRenameIn(BaseModel):
    items: List[FsRenameItemIn]


class FsRemoveIn(BaseModel):
    paths: List[str] = Field(..., description="Files or folders to delete")


class FsTaskIn(BaseModel):
    name: str = Field(..., description="create | copy | cut | rename | remove | clear")
    items: List[Any] = Field(default_factory=list, description="Item objects, or bare paths for remove")
    overwrite: Optional[bool] = Field(None, description="Defaults to true inside a bulk run")


class FsBulkIn(BaseModel):
    tasks: List[FsTaskIn]


class FileTools:
    """
    Very thin tool adapters:
    - take validated inputs (Pydantic)
    - call the service (business logic + sandboxing)
    - return plain JSON-able results
    """

    def __init__(self, fs_service: FileSystemService):
        self.fs = fs_service

    async def fs_browse(self, input: FsBrowseIn) -> List[Dict[str, Any]]:
        entries = await self.fs.browse(input.path)
        return [e.model_dump(exclude_none=True) for e in entries]

    async def fs_read(self, input: FsReadIn) -> str:
        return await self.fs.read_text(input.path)

    async def fs_create(self, input: FsCreateIn) -> Dict[str, str]:
        res = await self.fs.create([i.model_dump() for i in input.items], input.overwrite)
        return res.model_dump()

    async def fs_copy(self, input: FsTransferIn) -> Dict[str, str]:
        res = await self.fs.copy([i.model_dump() for i in input.items], input.overwrite)
        return res.model_dump()

    async def fs_cut(self, input: FsTransferIn) -> Dict[str, str]:
        res = await self.fs.cut([i.model_dump() for i in input.items], input.overwrite)
        return res.model_dump()

    async def fs_rename(self, input: FsRenameIn) -> Dict[str, str]:
        res = await self.fs.rename([i.model_dump() for i in input.items])
        return res.model_dump()

    async def fs_remove(self, input: FsRemoveIn) -> Dict[str, str]:
        res = await self.fs.remove(input.paths)
        return res.model_dump()

    async def fs_clear(self) -> Dict[str, str]:
        res = await self.fs.clear()
        return res.model_dump()

    async def fs_bulk(self, input: FsBulkIn) -> Dict[str, str]:
        res = await self.fs.bulk([t.model_dump() for t in input.tasks])
        return res.model_dump()


def register_file_tools(mcp: FastMCP, fs_service: FileSystemService) -> FileTools:
    tools = FileTools(fs_service)

    @mcp.tool(name="fs_browse", description="List the file tree of a folder under sandbox root")
    async def fs_browse(input: FsBrowseIn) -> List[Dict[str, Any]]:
        return await tools.fs_browse(input)

    @mcp.tool(name="fs_read", description="Read a text file under sandbox root")
    async def fs_read(input: FsReadIn) -> str:
        return await tools.fs_read(input)

    @mcp.tool(name="fs_create", description="Create folders and text files under sandbox root")
    async def fs_create(input: FsCreateIn) -> Dict[str, str]:
        return await tools.fs_create(input)

    @mcp.tool(name="fs_copy", description="Copy files or folders within sandbox root")
    async def fs_copy(input: FsTransferIn) -> Dict[str, str]:
        return await tools.fs_copy(input)

    @mcp.tool(name="fs_cut", description="Move files or folders within sandbox root")
    async def fs_cut(input: FsTransferIn) -> Dict[str, str]:
        return await tools.fs_cut(input)

    @mcp.tool(name="fs_rename", description="Rename files or folders in place")
    async def fs_rename(input: FsRenameIn) -> Dict[str, str]:
        return await tools.fs_rename(input)

    @mcp.tool(name="fs_remove", description="Delete files or folders under sandbox root")
    async def fs_remove(input: FsRemoveIn) -> Dict[str, str]:
        return await tools.fs_remove(input)

    @mcp.tool(name="fs_clear", description="Delete everything under sandbox root")
    async def fs_clear() -> Dict[str, str]:
        return await tools.fs_clear()

    @mcp.tool(name="fs_bulk", description="Run a list of file operations in order, stopping at the first error")
    async def fs_bulk(input: FsBulkIn) -> Dict[str, str]:
        return await tools.fs_bulk(input)

    return tools
