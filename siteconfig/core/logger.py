# -*- coding: utf-8 -*-
"""
@File    : logger.py
@Desc    : 日志初始化 (console + 可选轮转文件, standard / json 两种格式)
"""
import sys
import json
import logging
import logging.config
from typing import Optional

from siteconfig.core.config import Settings, settings as default_settings


class JSONFormatter(logging.Formatter):
    """
    自定义 JSON 格式化器，适用于生产环境日志收集 (ELK/EFK/Datadog)
    """

    # LogRecord 自带的属性，extra 之外的都跳过
    skip_keys = {
        "args", "asctime", "created", "exc_info", "exc_text", "filename",
        "funcName", "levelname", "levelno", "lineno", "module",
        "msecs", "message", "msg", "name", "pathname", "process",
        "processName", "relativeCreated", "stack_info", "thread", "threadName",
        "taskName",
    }

    def format(self, record: logging.LogRecord) -> str:
        # 基础字段
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "func_name": record.funcName,
            "line_no": record.lineno,
            "process_id": record.process,
            "thread_name": record.threadName,
        }

        # 异常堆栈信息
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        # 处理 extra 参数: logger.info("msg", extra={"field": "postsPerPage"})
        for key, value in record.__dict__.items():
            if key not in self.skip_keys:
                log_record[key] = value

        return json.dumps(log_record, ensure_ascii=False, default=str)


def build_logging_config(settings: Settings) -> dict:
    """生成 dictConfig 配置字典"""
    # 确定日志级别 (将字符串转为 logging 常量)
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    # 确定格式化器 (开发环境用 standard，生产环境可选 json)
    formatter_name = "json" if settings.LOG_JSON_FORMAT else "standard"

    handlers = {
        # 控制台输出
        "console": {
            "class": "logging.StreamHandler",
            "level": log_level,
            "formatter": formatter_name,
            "stream": sys.stderr,
        },
    }
    app_handlers = ["console"]

    if settings.LOG_TO_FILE:
        log_path = settings.BASE_DIR / settings.LOG_DIR
        log_path.mkdir(parents=True, exist_ok=True)
        handlers.update({
            # Info 文件输出 (自动轮转)
            "file_info": {
                "class": "logging.handlers.RotatingFileHandler",
                "level": log_level,
                "formatter": formatter_name,
                "filename": str(log_path / "app.log"),
                "maxBytes": settings.LOG_MAX_BYTES,
                "backupCount": settings.LOG_BACKUP_COUNT,
                "encoding": "utf-8",
            },
            # Error 文件输出 (单独记录错误)
            "file_error": {
                "class": "logging.handlers.RotatingFileHandler",
                "level": "ERROR",
                "formatter": formatter_name,
                "filename": str(log_path / "error.log"),
                "maxBytes": settings.LOG_MAX_BYTES,
                "backupCount": settings.LOG_BACKUP_COUNT,
                "encoding": "utf-8",
            },
        })
        app_handlers += ["file_info", "file_error"]

    return {
        "version": 1,
        "disable_existing_loggers": False,  # 重要：防止 uvicorn 日志被禁用

        "formatters": {
            "standard": {
                "format": "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {
                "()": JSONFormatter,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },

        "handlers": handlers,

        "loggers": {
            "siteconfig": {
                "handlers": app_handlers,
                "level": log_level,
                "propagate": False,
            },
            # 接管 Uvicorn 的日志，使其格式统一
            "uvicorn": {
                "handlers": ["console"],
                "level": "INFO",
                "propagate": False,
            },
            "uvicorn.access": {
                "handlers": ["console"],
                "level": "INFO",
                "propagate": False,
            },
        },
    }


def setup_logging(settings: Optional[Settings] = None):
    """
    初始化日志配置
    """
    logging.config.dictConfig(build_logging_config(settings or default_settings))
