# fsbox/models.py
from __future__ import annotations
from typing import Any, List, Optional
from pydantic import BaseModel, Field


class Entry(BaseModel):
    """
    One node of a tree listing. Files carry `size`, directories carry
    `children` in directory-iteration order.
    """
    name: str
    path: str = Field(..., description="Path relative to the sandbox root")
    is_dir: bool
    size: Optional[int] = None
    children: Optional[List[Entry]] = None


class CreateItem(BaseModel):
    path: str = Field(..., description="Target path; extensionless paths are created as folders")
    # bytes, str (UTF-8), a readable binary stream, or None for an empty file
    content: Any = None


class TransferItem(BaseModel):
    src: str
    dst: str


class RenameItem(BaseModel):
    old: str
    new: str


class Task(BaseModel):
    name: str = Field(..., description="create | copy | cut | rename | remove | clear")
    items: List[Any] = Field(default_factory=list)
    overwrite: Optional[bool] = None


class OperationResult(BaseModel):
    res: str = "ok"
