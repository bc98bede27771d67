from typing import Any, Dict, List, Optional


class ConfigError(Exception):
    """站点配置加载失败的基类"""


class MalformedInput(ConfigError):
    """配置文档无法解析 (JSON / YAML / TOML 语法错误, 文件不可读)"""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


class SchemaViolation(ConfigError):
    """配置文档可以解析, 但字段缺失、类型错误或违反约束"""

    def __init__(self, field: str, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        self.field = field
        self.errors = errors or [{"field": field, "message": message}]
        super().__init__(f"{field}: {message}")
