import os
import pathlib
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# 项目根目录（config.py 在 siteconfig/core/）
BASE_DIR = pathlib.Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    # App
    # 应用基础配置
    APP_NAME: str = Field(default='Site Config Service', description='应用名称')
    APP_VERSION: str = Field(default='1.0.0', description='应用版本')
    ENVIRONMENT: Literal['development', 'staging', 'production'] = Field(default='development', description='运行环境')
    DEBUG: bool = Field(default=False, description='调试模式')

    # 服务器配置
    HOST: str = Field(default='0.0.0.0', description='服务器主机')
    PORT: int = Field(default=8090, description='服务器端口')
    API_V1_PREFIX: str = Field("/api/v1", description="API 路径前缀")

    # 站点配置文件
    SITE_CONFIG_PATH: pathlib.Path = Field(default=BASE_DIR / 'config' / 'site.yaml', description='站点配置文件路径')

    # 日志配置
    BASE_DIR: pathlib.Path = BASE_DIR
    LOG_LEVEL: str = Field(default='INFO', description='日志级别')
    LOG_DIR: str = Field(default='logs', description='日志目录 (相对 BASE_DIR)')
    LOG_JSON_FORMAT: bool = Field(default=False, description='是否输出 JSON 日志')
    LOG_TO_FILE: bool = Field(default=False, description='是否写入轮转日志文件')
    LOG_MAX_BYTES: int = 10 * 1024 * 1024  # 10 MB
    LOG_BACKUP_COUNT: int = 5

    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', case_sensitive=True, extra='ignore')

    @property
    def is_development(self) -> bool:
        """是否为开发环境"""
        return self.ENVIRONMENT == 'development'


# 根据环境加载不同配置文件
@lru_cache
def get_settings() -> Settings:
    env = os.getenv('ENVIRONMENT', 'development')

    # 使用绝对路径
    env_file_map = {
        'development': BASE_DIR / '.env.dev',
        'staging': BASE_DIR / '.env.staging',
        'production': BASE_DIR / '.env.prod',
    }
    env_file = env_file_map.get(env, BASE_DIR / '.env')

    return Settings(_env_file=env_file)


# 全局配置实例
settings = get_settings()
