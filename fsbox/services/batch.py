# fsbox/services/batch.py
from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, Iterable, Union

from fsbox.errors import UnknownOperationError
from fsbox.models import OperationResult, Task

if TYPE_CHECKING:
    from fsbox.services.filesystem import FileSystemService

logger = logging.getLogger(__name__)


class BatchRunner:
    """
    Run an ordered list of tasks against one sandbox.

    Fail-fast: the first failing task (or item inside it) stops the batch.
    Earlier tasks stay applied; nothing is rolled back.

    Note that `create` defaults to overwrite=True here, while calling
    FileSystemService.create directly defaults to False.
    """

    def __init__(self, service: FileSystemService):
        self.service = service
        self._handlers: Dict[str, Callable[[Task], Awaitable[Any]]] = {
            "create": lambda t: service.create(t.items, _overwrite(t)),
            "copy": lambda t: service.copy(t.items, _overwrite(t)),
            "cut": lambda t: service.cut(t.items, _overwrite(t)),
            "rename": lambda t: service.rename(t.items),
            "remove": lambda t: service.remove(t.items),
            "clear": lambda t: service.clear(),
        }

    async def run(self, tasks: Iterable[Union[Task, dict]]) -> OperationResult:
        for i, raw in enumerate(tasks):
            task = Task.model_validate(raw)
            handler = self._handlers.get(task.name)
            if handler is None:
                raise UnknownOperationError(task.name)
            logger.debug("bulk task %d: %s", i, task.name)
            await handler(task)
        return OperationResult()


def _overwrite(task: Task) -> bool:
    return True if task.overwrite is None else task.overwrite
