from .rwlock import ReadWriteLock
from .task_store import TaskStore, seed_example_tasks

__all__ = ["ReadWriteLock", "TaskStore", "seed_example_tasks"]
