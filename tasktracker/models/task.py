import re
from enum import Enum
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Any, Optional
import uuid


_HEX_UUID = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"

# 允许的 UUID 写法：标准格式、{...}、urn:uuid: 前缀、32 位无连字符
_UUID_PATTERN = re.compile(
    "|".join([
        _HEX_UUID,
        r"\{" + _HEX_UUID + r"\}",
        "urn:uuid:" + _HEX_UUID,
        "[0-9a-f]{32}",
    ]),
    re.IGNORECASE,
)


def parse_uuid(value: str) -> uuid.UUID:
    """
    严格解析 UUID

    uuid.UUID() 会接受 "+"、"_" 以及位置错误的连字符，这里先按固定格式校验。

    Raises:
        ValueError: 格式不合法
    """
    if not _UUID_PATTERN.fullmatch(value):
        raise ValueError(f"invalid UUID: {value!r}")
    return uuid.UUID(value)


class TaskStatus(str, Enum):
    """任务状态枚举（只允许 incomplete -> complete）"""
    INCOMPLETE = "incomplete"
    COMPLETE = "complete"


class Task(BaseModel):
    """任务模型"""
    id: uuid.UUID = Field(default_factory=uuid.uuid4, description="任务ID（服务端生成）")
    title: str = Field(..., description="任务标题")
    body: str = Field(..., description="任务内容")
    status: TaskStatus = Field(default=TaskStatus.INCOMPLETE, description="任务状态")

    def completed(self) -> "Task":
        """返回状态为 complete 的新副本（原任务已完成时副本内容与原任务相同）"""
        return self.model_copy(update={"status": TaskStatus.COMPLETE})


class TaskPayload(BaseModel):
    """
    创建 / 全量更新请求体

    与 Task 的 JSON 结构一致：id 和 status 会做格式校验，但不会被使用。
    null 值视为空字符串。
    """
    id: Optional[uuid.UUID] = Field(None, description="忽略")
    title: str = Field(default="", description="任务标题")
    body: str = Field(default="", description="任务内容")
    status: Optional[str] = Field(None, description="忽略")

    @model_validator(mode="before")
    @classmethod
    def _null_body(cls, data: Any) -> Any:
        # 顶层 null 等同于空对象
        return {} if data is None else data

    @field_validator("title", "body", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("id", mode="before")
    @classmethod
    def _strict_id(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_uuid(value)
        return value


class MessageResponse(BaseModel):
    """通用消息响应"""
    message: str


class ErrorResponse(BaseModel):
    """错误响应"""
    error: str
