# fsbox/errors.py
"""
Typed errors raised by the sandboxed file manager.

Each error also derives from the closest builtin so callers that only know
about ``PermissionError``, ``FileNotFoundError`` etc. keep working.
Storage failures are never wrapped: the underlying ``OSError`` propagates.
"""


class FileManagerError(Exception):
    """Base class for every file manager error."""


class IllegalPathError(FileManagerError, PermissionError):
    def __init__(self, msg: str = "Illegal path."):
        super().__init__(msg)


class TargetMissingError(FileManagerError, FileNotFoundError):
    def __init__(self, msg: str = "Target doesn't exist."):
        super().__init__(msg)


class TargetMustBeDirectoryError(FileManagerError, NotADirectoryError):
    def __init__(self, msg: str = "Target must be a folder."):
        super().__init__(msg)


class TargetMustBeFileError(FileManagerError, IsADirectoryError):
    def __init__(self, msg: str = "Target must be a file."):
        super().__init__(msg)


class AlreadyExistsError(FileManagerError, FileExistsError):
    def __init__(self, msg: str = "Target already exists."):
        super().__init__(msg)


class TypeMismatchError(FileManagerError, ValueError):
    def __init__(self, msg: str = "Source and target types do not match."):
        super().__init__(msg)


class DirectoryMismatchError(FileManagerError, ValueError):
    def __init__(self, msg: str = "Directory mismatch."):
        super().__init__(msg)


class UnknownOperationError(FileManagerError, KeyError):
    def __init__(self, name: str):
        super().__init__(f"Unknown operation: {name}")
        self.name = name

    def __str__(self) -> str:
        return self.args[0]


class UnrecognizedEntryError(FileManagerError):
    def __init__(self, path: str = ""):
        super().__init__(f"Unrecognized target: {path}" if path else "Unrecognized target.")
