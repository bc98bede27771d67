"""
Helpers the page generator uses to turn a SiteConfig into rendered pieces:
contact links, navigation links, pagination paths and feature toggles.
"""
import math
import re
from typing import List

from siteconfig.schemas.site import ContactInfo, ContactLink, FeatureFlags, NavLink, SiteConfig

# "" 和 "#" 都表示该渠道未启用
DISABLED_VALUES = ("", "#")

CONTACT_URL_TEMPLATES = {
    "email": "mailto:{}",
    "telegram": "https://t.me/{}",
    "twitter": "https://www.twitter.com/{}",
    "github": "https://github.com/{}",
    "vkontakte": "https://vk.com/{}",
    "linkedin": "https://www.linkedin.com/in/{}",
    "instagram": "https://www.instagram.com/{}",
    "line": "line://ti/p/{}",
    "gitlab": "https://www.gitlab.com/{}",
    "weibo": "https://www.weibo.com/{}",
    "codepen": "https://www.codepen.io/{}",
    "youtube": "https://www.youtube.com/channel/{}",
    "soundcloud": "https://soundcloud.com/{}",
}

_ABSOLUTE_URL_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")
_MAILTO_RE = re.compile(r"^mailto:", re.IGNORECASE)


def is_channel_enabled(value: str) -> bool:
    return value.strip() not in DISABLED_VALUES


def contact_href(channel: str, value: str) -> str:
    """渠道账号 -> 链接; facebook / rss, 完整 URL 以及 mailto: 链接原样返回"""
    value = value.strip()
    if _ABSOLUTE_URL_RE.match(value) or (channel == "email" and _MAILTO_RE.match(value)):
        return value
    template = CONTACT_URL_TEMPLATES.get(channel)
    return template.format(value) if template else value


def contact_links(contacts: ContactInfo) -> List[ContactLink]:
    """已启用渠道的链接列表, 按渠道顺序"""
    return [
        ContactLink(channel=channel, value=value, href=contact_href(channel, value))
        for channel, value in contacts.channel_items()
        if is_channel_enabled(value)
    ]


def join_path(path_prefix: str, path: str) -> str:
    if _ABSOLUTE_URL_RE.match(path):
        return path
    return path_prefix.rstrip("/") + "/" + path.lstrip("/")


def nav_links(config: SiteConfig) -> List[NavLink]:
    """菜单 -> 导航链接, 保持配置中的顺序"""
    return [NavLink(label=item.label, href=join_path(config.pathPrefix, item.path)) for item in config.menu]


def page_count(total_posts: int, posts_per_page: int) -> int:
    """列表页数, 没有文章时也至少有一页"""
    if posts_per_page <= 0:
        raise ValueError("posts_per_page must be positive")
    if total_posts < 0:
        raise ValueError("total_posts must not be negative")
    return max(1, math.ceil(total_posts / posts_per_page))


def page_path(page: int, path_prefix: str = "/") -> str:
    """第 0 页是首页, 之后为 /page/N"""
    if page < 0:
        raise ValueError("page must not be negative")
    return join_path(path_prefix, "/" if page == 0 else f"/page/{page}")


def feature_flags(config: SiteConfig) -> FeatureFlags:
    return FeatureFlags(
        comments=bool(config.disqusShortname.strip()),
        analytics=bool(config.googleAnalyticsId.strip()),
        katex=config.useKatex,
    )
