"""
Site configuration loader.

Reads a JSON / YAML / TOML document, validates it against :class:`SiteConfig`
and returns the frozen record. Loading is one-shot and fail-fast:

* the document cannot be parsed        -> :class:`MalformedInput`
* it parses but breaks the schema      -> :class:`SchemaViolation` (``field`` names the culprit)

:func:`dump_site_config` writes a record back out in any of the three formats.
"""
import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import tomli_w
import yaml
from pydantic import ValidationError

from siteconfig.core.exceptions import MalformedInput, SchemaViolation
from siteconfig.schemas.site import SiteConfig

logger = logging.getLogger(__name__)

ROOT_FIELD = "<root>"

SUFFIX_FORMATS = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".toml": "toml",
}
FORMATS = ("json", "yaml", "toml")


def detect_format(path: Union[str, Path]) -> str:
    """根据文件后缀判断格式"""
    suffix = Path(path).suffix.lower()
    if suffix not in SUFFIX_FORMATS:
        raise MalformedInput(f"unsupported config file format: {suffix or '(none)'}", source=str(path))
    return SUFFIX_FORMATS[suffix]


def _check_format(fmt: str) -> str:
    fmt = fmt.lower()
    if fmt == "yml":
        fmt = "yaml"
    if fmt not in FORMATS:
        raise MalformedInput(f"unsupported config format: {fmt}")
    return fmt


def parse_document(text: str, fmt: str, source: Optional[str] = None) -> Any:
    """把文本解析为 Python 数据, 解析失败抛 MalformedInput"""
    fmt = _check_format(fmt)
    try:
        if fmt == "json":
            return json.loads(text)
        if fmt == "yaml":
            return yaml.safe_load(text)
        return tomllib.loads(text)
    # ValueError: 超长整数字面量; RecursionError: 嵌套过深
    except (ValueError, RecursionError, yaml.YAMLError) as e:
        raise MalformedInput(f"cannot parse {fmt.upper()}: {e}", source=source) from e


def _field_path(loc) -> str:
    return ".".join(str(part) for part in loc) or ROOT_FIELD


def load_site_config_data(data: Any, source: Optional[str] = None) -> SiteConfig:
    """校验已解析的数据, 返回只读的 SiteConfig"""
    if not isinstance(data, Mapping):
        kind = "empty document" if data is None else type(data).__name__
        raise SchemaViolation(ROOT_FIELD, f"document must be a mapping, got {kind}")

    try:
        config = SiteConfig.model_validate(dict(data))
    except ValidationError as e:
        errors = [
            {"field": _field_path(err["loc"]), "message": err["msg"], "type": err["type"]}
            for err in e.errors()
        ]
        first = errors[0]
        logger.warning(
            "Site config rejected: %s: %s (%d problem(s))", first["field"], first["message"], len(errors),
            extra={"source": source, "field": first["field"]},
        )
        raise SchemaViolation(first["field"], first["message"], errors) from None

    logger.info("Site config loaded: %s", config.title, extra={"source": source})
    return config


def load_site_config_text(text: str, fmt: str = "json", source: Optional[str] = None) -> SiteConfig:
    """解析并校验一段配置文本"""
    data = parse_document(text, fmt, source=source)
    return load_site_config_data(data, source=source)


def load_site_config(path: Union[str, Path], fmt: Optional[str] = None) -> SiteConfig:
    """从文件加载站点配置, 未指定格式时按后缀判断"""
    path = Path(path)
    fmt = _check_format(fmt) if fmt else detect_format(path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedInput(f"cannot read file: {e}", source=str(path)) from e

    logger.debug("Reading site config from %s (%s)", path, fmt)
    return load_site_config_text(text, fmt, source=str(path))


def dump_site_config(config: SiteConfig, fmt: str = "json") -> str:
    """把 SiteConfig 序列化为文本, 字段名和顺序与 schema 一致"""
    fmt = _check_format(fmt)
    data = config.model_dump(mode="json")
    if fmt == "json":
        return json.dumps(data, ensure_ascii=False, indent=2) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(data, allow_unicode=True, sort_keys=False)
    return tomli_w.dumps(data)
