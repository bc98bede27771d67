import re
from typing import Annotated, Tuple

from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, TypeAdapter, ValidationError, field_validator

# 联系方式渠道 (封闭集合, 顺序即渲染顺序)
CHANNELS = (
    "email", "facebook", "telegram", "twitter", "github", "rss", "vkontakte", "linkedin",
    "instagram", "line", "gitlab", "weibo", "codepen", "youtube", "soundcloud",
)

ANALYTICS_ID_RE = re.compile(r"^(UA-\d+-\d+|G-[A-Z0-9]+|GTM-[A-Z0-9]+)$")
DISQUS_SHORTNAME_RE = re.compile(r"^[A-Za-z0-9_-]+$")

_http_url = TypeAdapter(AnyHttpUrl)


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be empty")
    return value


class _Record(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class MenuItem(_Record):
    label: StrictStr
    path: StrictStr

    @field_validator("label", "path")
    @classmethod
    def check_not_blank(cls, value: str) -> str:
        return _not_blank(value)


class ContactInfo(_Record):
    """渠道 -> 账号/链接, 空字符串或 "#" 表示未启用"""
    email: StrictStr = ""
    facebook: StrictStr = ""
    telegram: StrictStr = ""
    twitter: StrictStr = ""
    github: StrictStr = ""
    rss: StrictStr = ""
    vkontakte: StrictStr = ""
    linkedin: StrictStr = ""
    instagram: StrictStr = ""
    line: StrictStr = ""
    gitlab: StrictStr = ""
    weibo: StrictStr = ""
    codepen: StrictStr = ""
    youtube: StrictStr = ""
    soundcloud: StrictStr = ""

    def channel_items(self):
        """按渠道顺序返回 (channel, value)"""
        return [(channel, getattr(self, channel)) for channel in CHANNELS]


class AuthorInfo(_Record):
    name: StrictStr
    photo: StrictStr
    bio: StrictStr
    contacts: ContactInfo

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        return _not_blank(value)


class SiteConfig(_Record):
    # Site Info
    url: StrictStr
    pathPrefix: StrictStr
    title: StrictStr
    subtitle: StrictStr
    copyright: StrictStr

    # Feature toggles
    disqusShortname: StrictStr
    postsPerPage: Annotated[StrictInt, Field(gt=0)]
    googleAnalyticsId: StrictStr
    useKatex: StrictBool

    # Navigation
    menu: Tuple[MenuItem, ...] = Field(min_length=1)

    # About Me
    author: AuthorInfo

    @field_validator("title")
    @classmethod
    def check_title(cls, value: str) -> str:
        return _not_blank(value)

    @field_validator("url")
    @classmethod
    def check_url(cls, value: str) -> str:
        if value:
            try:
                _http_url.validate_python(value)
            except ValidationError:
                raise ValueError("must be an absolute http(s) URL") from None
        return value

    @field_validator("pathPrefix")
    @classmethod
    def check_path_prefix(cls, value: str) -> str:
        if value and not value.startswith("/"):
            raise ValueError("must start with '/'")
        return value

    @field_validator("googleAnalyticsId")
    @classmethod
    def check_analytics_id(cls, value: str) -> str:
        if value and not ANALYTICS_ID_RE.match(value):
            raise ValueError("must look like UA-XXXXX-N, G-XXXXXX or GTM-XXXXXX")
        return value

    @field_validator("disqusShortname")
    @classmethod
    def check_disqus_shortname(cls, value: str) -> str:
        if value and not DISQUS_SHORTNAME_RE.match(value):
            raise ValueError("must contain only letters, digits, '-' and '_'")
        return value


# 以下为渲染用的派生视图 (由 services.render 生成)

class NavLink(BaseModel):
    label: str
    href: str


class ContactLink(BaseModel):
    channel: str
    value: str
    href: str


class FeatureFlags(BaseModel):
    comments: bool
    analytics: bool
    katex: bool
