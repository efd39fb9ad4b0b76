from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """服务配置（默认值即可直接运行，可通过 TASKTRACKER_ 前缀的环境变量覆盖）"""

    model_config = SettingsConfigDict(
        env_prefix="TASKTRACKER_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "Task Tracker API"

    # 服务监听
    host: str = "0.0.0.0"
    port: int = 8080
    reload: bool = False

    # 日志
    log_level: str = "INFO"

    # 启动时写入两条示例任务
    seed_examples: bool = True

    # CORS
    cors_origins: List[str] = ["*"]


settings = Settings()
