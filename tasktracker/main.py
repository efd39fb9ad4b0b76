import logging
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from . import __version__
from .config import settings
from .api import tasks
from .api.errors import register_exception_handlers
from .storage.task_store import TaskStore, seed_example_tasks

# 配置日志
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(task_store: Optional[TaskStore] = None, seed_examples: Optional[bool] = None) -> FastAPI:
    """
    创建 FastAPI 应用

    Args:
        task_store: 任务存储实例，不传则新建
        seed_examples: 启动时是否写入示例任务，默认读取配置
    """
    store = task_store if task_store is not None else TaskStore()
    if seed_examples is None:
        seed_examples = settings.seed_examples

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # 启动时初始化（在接收请求之前写入示例数据）
        logger.info("🚀 Task Tracker 启动")
        if seed_examples:
            seed_example_tasks(store)
        logger.info(f"📦 当前任务数: {len(store)}")
        yield
        # 关闭时清理
        logger.info("👋 Task Tracker 关闭")

    app = FastAPI(
        title=settings.app_name,
        description="内存任务管理服务，提供任务的增删改查接口",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.task_store = store

    # CORS 配置
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # 路由注册
    app.include_router(tasks.router)

    @app.get("/", summary="服务信息", tags=["系统"])
    async def root():
        """获取 API 服务信息"""
        return {"message": f"{settings.app_name} is running", "version": __version__}

    @app.get("/health", summary="健康检查", tags=["系统"])
    async def health():
        """检查服务健康状态"""
        return {"status": "healthy"}

    return app


app = create_app()


def run() -> None:
    """启动服务（内存存储，只能单 worker 运行）"""
    import uvicorn
    uvicorn.run(
        "tasktracker.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
