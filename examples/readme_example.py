from collectkit import clone, contains, filter_, flatten, index, map_, pick, sorted_uniq, uniq
from collectkit.config import LoggingSettings, configure_logging
from collectkit.rng import RandomSource

from examples.components import Task, TaskQueue


def main() -> None:
    configure_logging(LoggingSettings(level="DEBUG"))

    tasks = [
        Task(title="Collect data", owner="ada"),
        Task(title="Analyze data", owner="bob", done=True),
        Task(title="Generate report", owner="ada"),
        Task(title="Review findings", owner="cy"),
    ]
    queue = TaskQueue(tasks)

    # Searches are answered by TaskQueue.contains and TaskQueue.index
    print(f"Report at position {index(queue, Task(title='Generate report', owner='?'))}")
    print(f"Queue has 'Lunch': {contains(queue, Task(title='Lunch', owner='?'))}")

    rows = [t.model_dump() for t in tasks]
    print(f"Open tasks: {map_('title', filter_({'done': False}, rows))}")
    print(f"Owners: {sorted_uniq(uniq(rows, 'owner'))}")
    print(f"First row, trimmed: {pick(rows[0], ['title', 'owner'])}")
    print(f"Flattened: {flatten({'queue': rows[:2]})}")

    backup = clone(queue)
    backup.append(Task(title="Lunch", owner="dee"))
    print(f"Original size {queue.size()}, backup size {backup.size()}")

    source = RandomSource(seed=42)
    print(f"Picked for review: {source.choice(tasks).title}")


if __name__ == "__main__":
    main()
