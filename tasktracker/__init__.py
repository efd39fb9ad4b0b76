"""Task Tracker - 内存任务管理 HTTP 服务"""

__version__ = "1.0.0"
