import logging
import uuid
from typing import List, Optional

from ..models.task import Task, TaskPayload, TaskStatus
from .rwlock import ReadWriteLock

logger = logging.getLogger(__name__)

# 启动时写入的示例任务 (title, body)
EXAMPLE_TASKS = [
    ("buy groceries", "list: banana, apple, bread"),
    ("go to gym", "It's a leg-day today"),
]


class TaskStore:
    """
    任务存储（内存）

    读操作持有共享锁，写操作持有独占锁；按 id 线性查找。
    返回的 Task 都是副本，调用方修改不会影响存储内容。
    """

    def __init__(self):
        self._tasks: List[Task] = []
        self._lock = ReadWriteLock()

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._tasks)

    def list_all(self) -> List[Task]:
        """列出所有任务（快照）"""
        with self._lock.read_locked():
            return [task.model_copy() for task in self._tasks]

    def get(self, task_id: uuid.UUID) -> Optional[Task]:
        """根据 ID 获取任务，不存在返回 None"""
        with self._lock.read_locked():
            index = self._index_of(task_id)
            if index is None:
                return None
            return self._tasks[index].model_copy()

    def insert(self, payload: TaskPayload) -> Task:
        """创建任务：服务端生成 ID，状态强制为 incomplete"""
        task = Task(
            id=uuid.uuid4(),
            title=payload.title,
            body=payload.body,
            status=TaskStatus.INCOMPLETE,
        )
        with self._lock.write_locked():
            self._tasks.append(task)
        logger.info(f"创建任务: {task.id}, 标题: {task.title}")
        return task.model_copy()

    def replace(self, task_id: uuid.UUID, payload: TaskPayload) -> Optional[Task]:
        """全量更新 title/body，保留原 ID 和状态"""
        with self._lock.write_locked():
            index = self._index_of(task_id)
            if index is None:
                return None
            current = self._tasks[index]
            updated = Task(
                id=current.id,
                title=payload.title,
                body=payload.body,
                status=current.status,
            )
            self._tasks[index] = updated
        logger.info(f"更新任务: {task_id}")
        return updated.model_copy()

    def mark_complete(self, task_id: uuid.UUID) -> Optional[Task]:
        """标记任务为已完成（幂等）"""
        with self._lock.write_locked():
            index = self._index_of(task_id)
            if index is None:
                return None
            updated = self._tasks[index].completed()
            self._tasks[index] = updated
        logger.info(f"任务已完成: {task_id}")
        return updated.model_copy()

    def remove(self, task_id: uuid.UUID) -> bool:
        """删除任务，查找与删除在同一次写锁内完成"""
        with self._lock.write_locked():
            index = self._index_of(task_id)
            if index is None:
                return False
            del self._tasks[index]
        logger.info(f"删除任务: {task_id}")
        return True

    def _index_of(self, task_id: uuid.UUID) -> Optional[int]:
        # 调用方必须已持有锁
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None


def seed_example_tasks(store: TaskStore) -> List[Task]:
    """写入示例任务"""
    return [store.insert(TaskPayload(title=title, body=body)) for title, body in EXAMPLE_TASKS]
