"""Tests for the example collection types."""

from collectkit import clone, contains, index

from examples.components import Task, TaskQueue


def _queue():
    return TaskQueue([Task(title="Collect data", owner="ada"), Task(title="Write report", owner="bob")])


def test_task_queue_answers_contains():
    queue = _queue()

    assert contains(queue, Task(title="Write report", owner="someone else"))
    assert not contains(queue, Task(title="Lunch", owner="ada"))


def test_task_queue_answers_index():
    queue = _queue()

    assert index(queue, Task(title="Write report", owner="?")) == 1
    assert index(queue, Task(title="Lunch", owner="?")) == -1


def test_task_queue_clone_is_independent():
    queue = _queue()
    backup = clone(queue)
    backup.append(Task(title="Lunch", owner="dee"))

    assert queue.size() == 2
    assert backup.size() == 3
