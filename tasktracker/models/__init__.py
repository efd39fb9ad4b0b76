from .task import Task, TaskStatus, TaskPayload, MessageResponse, ErrorResponse, parse_uuid

__all__ = ["Task", "TaskStatus", "TaskPayload", "MessageResponse", "ErrorResponse", "parse_uuid"]
