import pytest
from fastapi.testclient import TestClient

from tasktracker.main import create_app
from tasktracker.storage.task_store import TaskStore


@pytest.fixture
def store():
    """空的任务存储"""
    return TaskStore()


@pytest.fixture
def client(store):
    """绑定独立存储、不写入示例数据的测试客户端"""
    app = create_app(task_store=store, seed_examples=False)
    with TestClient(app) as test_client:
        yield test_client
