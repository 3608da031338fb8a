# tests/test_paths.py
from pathlib import Path
import pytest

from fsbox.errors import IllegalPathError
from fsbox.services.paths import EntryKind, is_legal, kind_of, pretreat, resolve


ROOT = Path("/a/b")


def test_resolve_relative_and_absolute():
    assert resolve(ROOT, "c/d.txt") == Path("/a/b/c/d.txt")
    assert resolve(ROOT, "./c/../e") == Path("/a/b/e")
    assert resolve(ROOT, "/x/y") == Path("/x/y")
    assert resolve(ROOT, None) == ROOT


@pytest.mark.parametrize("target", ["/a/b", "/a", "/a/bc", "/a/bc/x.txt", "/x"])
def test_is_legal_rejects_root_and_outside(target):
    assert is_legal(ROOT, Path(target)) is False


@pytest.mark.parametrize("target", ["/a/b/c", "/a/b/c/d/e/f.txt", "/a/b/..foo"])
def test_is_legal_accepts_descendants(target):
    assert is_legal(ROOT, Path(target)) is True


def test_pretreat_raises_on_escape():
    with pytest.raises(IllegalPathError):
        pretreat(ROOT, "../bc/evil.txt")
    with pytest.raises(IllegalPathError):
        pretreat(ROOT, ".")
    # still a PermissionError for callers that only know builtins
    with pytest.raises(PermissionError):
        pretreat(ROOT, "c/../../..")
    assert pretreat(ROOT, "c/../d") == Path("/a/b/d")


@pytest.mark.parametrize(
    "name,kind",
    [
        ("f.txt", EntryKind.FILE),
        ("archive.tar.gz", EntryKind.FILE),
        ("dir/sub/index.html", EntryKind.FILE),
        ("folder", EntryKind.DIRECTORY),
        (".env", EntryKind.DIRECTORY),
        ("dir.d/Makefile", EntryKind.DIRECTORY),
    ],
)
def test_kind_of_is_syntactic(name, kind):
    assert kind_of(Path("/nonexistent") / name) is kind
