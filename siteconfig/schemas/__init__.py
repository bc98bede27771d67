# Schemas module
from siteconfig.schemas.site import (
    CHANNELS, AuthorInfo, ContactInfo, ContactLink, FeatureFlags, MenuItem, NavLink, SiteConfig,
)
from siteconfig.schemas.common import ResponseModel

__all__ = [
    "CHANNELS", "AuthorInfo", "ContactInfo", "ContactLink", "FeatureFlags", "MenuItem", "NavLink", "SiteConfig",
    "ResponseModel",
]
