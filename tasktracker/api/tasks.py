"""任务 CRUD API"""

import logging
import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from pydantic import ValidationError

from ..models.task import Task, TaskPayload, MessageResponse, ErrorResponse, parse_uuid
from ..storage.task_store import TaskStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tasks", tags=["任务管理"])

TASK_NOT_FOUND = "task not found"


def get_task_store(request: Request) -> TaskStore:
    """获取应用级任务存储"""
    return request.app.state.task_store


def require_json_content(request: Request) -> None:
    """校验 Content-Type 必须为 JSON"""
    content_type = request.headers.get("content-type", "")
    if not content_type.startswith("application/json"):
        raise HTTPException(status_code=415, detail="Content-Type must be application/json")


def parse_task_id(task_id: str) -> uuid.UUID:
    """解析路径中的任务 ID"""
    try:
        return parse_uuid(task_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="invalid id")


async def read_task_payload(request: Request) -> TaskPayload:
    """
    解析并校验请求体

    校验顺序：JSON 格式 -> body -> title
    """
    raw = await request.body()
    try:
        payload = TaskPayload.model_validate_json(raw)
    except ValidationError:
        raise HTTPException(status_code=400, detail="invalid JSON body")

    if not payload.body:
        raise HTTPException(status_code=400, detail="field 'body' is required")
    if not payload.title:
        raise HTTPException(status_code=400, detail="field 'title' is required")

    return payload


@router.get(
    "",
    response_model=List[Task],
    summary="列出所有任务",
)
def list_tasks(store: TaskStore = Depends(get_task_store)):
    """返回当前所有任务的快照"""
    return store.list_all()


@router.get(
    "/{task_id}",
    response_model=Task,
    summary="查询任务",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def get_task(
    task_id: uuid.UUID = Depends(parse_task_id),
    store: TaskStore = Depends(get_task_store),
):
    """
    根据 ID 查询任务

    - **task_id**: 任务 UUID
    """
    task = store.get(task_id)
    if task is None:
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)
    return task


@router.post(
    "",
    response_model=Task,
    status_code=201,
    summary="创建任务",
    description="创建新任务，ID 由服务端生成，状态固定为 incomplete",
    dependencies=[Depends(require_json_content)],
    responses={400: {"model": ErrorResponse}, 415: {"model": ErrorResponse}},
)
def create_task(
    response: Response,
    payload: TaskPayload = Depends(read_task_payload),
    store: TaskStore = Depends(get_task_store),
):
    """
    创建任务

    - **title**: 任务标题（必填）
    - **body**: 任务内容（必填）
    - 请求体中的 id / status 会被忽略
    """
    task = store.insert(payload)
    response.headers["Location"] = f"/api/tasks/{task.id}"
    return task


@router.patch(
    "/{task_id}",
    response_model=Task,
    summary="标记任务完成",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def complete_task(
    task_id: uuid.UUID = Depends(parse_task_id),
    store: TaskStore = Depends(get_task_store),
):
    """将任务状态置为 complete，重复调用不会报错"""
    task = store.mark_complete(task_id)
    if task is None:
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)
    return task


@router.put(
    "/{task_id}",
    response_model=Task,
    summary="更新任务",
    description="全量更新 title / body，保留原有 ID 和状态",
    dependencies=[Depends(require_json_content)],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        415: {"model": ErrorResponse},
    },
)
def replace_task(
    task_id: uuid.UUID = Depends(parse_task_id),
    payload: TaskPayload = Depends(read_task_payload),
    store: TaskStore = Depends(get_task_store),
):
    """
    全量更新任务

    - **task_id**: 任务 UUID
    - **title** / **body**: 新内容（必填）
    """
    task = store.replace(task_id, payload)
    if task is None:
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)
    return task


@router.delete(
    "/{task_id}",
    response_model=MessageResponse,
    summary="删除任务",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def delete_task(
    task_id: uuid.UUID = Depends(parse_task_id),
    store: TaskStore = Depends(get_task_store),
):
    """删除任务"""
    if not store.remove(task_id):
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)
    return MessageResponse(message=f"deleted task with id {task_id}")
