"""Example collection types demonstrating collectkit's duck-typed hooks."""

from pydantic import BaseModel

from collectkit import Sequence


class Task(BaseModel):
    """Example: pydantic record, cloned via model_copy."""

    title: str
    owner: str
    done: bool = False


class TaskQueue(Sequence[Task]):
    """Example: list-backed Sequence that answers contains and index itself, by title."""

    def __init__(self, tasks: list[Task] | None = None):
        self._tasks = list(tasks or [])
        self._cursor = 0

    def next(self) -> Task:
        if self._cursor >= len(self._tasks):
            self._cursor = 0
            raise StopIteration
        task = self._tasks[self._cursor]
        self._cursor += 1
        return task

    def size(self) -> int:
        return len(self._tasks)

    def get(self, i: int) -> Task | None:
        return self._tasks[i] if -len(self._tasks) <= i < len(self._tasks) else None

    def set(self, i: int, value: Task) -> None:
        self._tasks[i] = value

    def delete(self, i: int) -> None:
        del self._tasks[i]

    def append(self, value: Task) -> None:
        self._tasks.append(value)

    def contains(self, x: Task) -> bool:
        return any(t.title == x.title for t in self._tasks)

    def index(self, x: Task, start: int = 0) -> int:
        titles = [t.title for t in self._tasks]
        return titles.index(x.title, start) if x.title in titles[start:] else -1

    def clone(self) -> "TaskQueue":
        return TaskQueue([t.model_copy() for t in self._tasks])
