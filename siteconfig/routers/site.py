from typing import List

from fastapi import APIRouter, Depends, Request

from siteconfig.schemas.common import ResponseModel
from siteconfig.schemas.site import ContactLink, FeatureFlags, NavLink, SiteConfig
from siteconfig.services.render import contact_links, feature_flags, nav_links


router = APIRouter(prefix="/site", tags=["site"])


def get_site_config(request: Request) -> SiteConfig:
    """启动时加载的站点配置 (只读)"""
    return request.app.state.site_config


@router.get("/config", response_model=ResponseModel[SiteConfig])
def read_site_config(config: SiteConfig = Depends(get_site_config)):
    """获取站点配置"""
    return ResponseModel(code=200, data=config)


@router.get("/menu", response_model=ResponseModel[List[NavLink]])
def read_menu(config: SiteConfig = Depends(get_site_config)):
    """获取导航菜单"""
    return ResponseModel(code=200, data=nav_links(config))


@router.get("/contacts", response_model=ResponseModel[List[ContactLink]])
def read_contacts(config: SiteConfig = Depends(get_site_config)):
    """获取作者联系方式 (跳过未启用的渠道)"""
    return ResponseModel(code=200, data=contact_links(config.author.contacts))


@router.get("/features", response_model=ResponseModel[FeatureFlags])
def read_features(config: SiteConfig = Depends(get_site_config)):
    """获取功能开关"""
    return ResponseModel(code=200, data=feature_flags(config))
