# tests/test_batch.py
from pathlib import Path
import pytest

from fsbox.errors import AlreadyExistsError, UnknownOperationError
from fsbox.models import Task
from fsbox.services.batch import BatchRunner
from fsbox.services.filesystem import FileSystemService


@pytest.fixture
def fs(tmp_path: Path) -> FileSystemService:
    return FileSystemService(tmp_path / "demo")


@pytest.mark.asyncio
async def test_bulk_create_then_rename(fs: FileSystemService):
    res = await fs.bulk(
        [
            {"name": "create", "items": [{"path": "x/y.txt"}]},
            {"name": "rename", "items": [{"old": "x/y.txt", "new": "x/y.css"}]},
        ]
    )
    assert res.res == "ok"
    assert [e.name for e in await fs.browse("x")] == ["y.css"]


@pytest.mark.asyncio
async def test_bulk_mixed_workflow(fs: FileSystemService):
    await BatchRunner(fs).run(
        [
            Task(
                name="create",
                items=[
                    {"path": "tmp/d/da"},
                    {"path": "tmp/d/db"},
                    {"path": "tmp/d/db/index.html", "content": "<p>"},
                ],
            ),
            Task(name="cut", items=[{"src": "tmp/d/db/index.html", "dst": "tmp/d/da/index.html"}]),
            Task(
                name="copy",
                items=[
                    {"src": "tmp/d/da/index.html", "dst": "tmp/d/da/index2.html"},
                    {"src": "tmp/d/da/index.html", "dst": "tmp/d/da/index3.html"},
                ],
            ),
            Task(
                name="rename",
                items=[
                    {"old": "tmp/d/da/index2.html", "new": "tmp/d/da/index.css"},
                    {"old": "tmp/d/da/index3.html", "new": "tmp/d/da/index.js"},
                ],
            ),
            Task(name="remove", items=["tmp/d/db"]),
        ]
    )
    names = sorted(e.name for e in await fs.browse("tmp/d/da"))
    assert names == ["index.css", "index.html", "index.js"]
    assert [e.name for e in await fs.browse("tmp/d")] == ["da"]


@pytest.mark.asyncio
async def test_bulk_create_defaults_to_overwrite(fs: FileSystemService):
    await fs.create([{"path": "f.txt", "content": "old"}])
    # direct call refuses, batch call replaces
    with pytest.raises(AlreadyExistsError):
        await fs.create([{"path": "f.txt", "content": "new"}])
    await fs.bulk([{"name": "create", "items": [{"path": "f.txt", "content": "new"}]}])
    assert (fs.root / "f.txt").read_text() == "new"

    with pytest.raises(AlreadyExistsError):
        await fs.bulk([{"name": "create", "items": [{"path": "f.txt"}], "overwrite": False}])


@pytest.mark.asyncio
async def test_bulk_unknown_operation_stops_batch(fs: FileSystemService):
    with pytest.raises(UnknownOperationError):
        await fs.bulk(
            [
                {"name": "create", "items": [{"path": "before"}]},
                {"name": "explode", "items": []},
                {"name": "create", "items": [{"path": "after"}]},
            ]
        )
    # earlier tasks stay committed
    assert (fs.root / "before").is_dir()
    assert not (fs.root / "after").exists()


@pytest.mark.asyncio
async def test_bulk_fails_fast_inside_task(fs: FileSystemService):
    with pytest.raises(FileNotFoundError):
        await fs.bulk(
            [
                {"name": "create", "items": [{"path": "a.txt", "content": "a"}]},
                {"name": "copy", "items": [{"src": "a.txt", "dst": "b.txt"}, {"src": "gone.txt", "dst": "c.txt"}]},
                {"name": "clear"},
            ]
        )
    assert (fs.root / "a.txt").exists()
    assert (fs.root / "b.txt").exists()
    assert not (fs.root / "c.txt").exists()


@pytest.mark.asyncio
async def test_bulk_clear(fs: FileSystemService):
    await fs.bulk([{"name": "create", "items": [{"path": "a/b"}]}, {"name": "clear"}])
    assert await fs.browse() == []
