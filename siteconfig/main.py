import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from siteconfig.core.config import Settings, settings as default_settings
from siteconfig.core.exceptions import ConfigError
from siteconfig.routers import site
from siteconfig.schemas.site import SiteConfig
from siteconfig.services.loader import load_site_config

logger = logging.getLogger(__name__)


def create_app(site_config: Optional[SiteConfig] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    创建应用。未传入 site_config 时在启动阶段从 SITE_CONFIG_PATH 加载,
    加载失败 (MalformedInput / SchemaViolation) 则应用无法启动。
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "site_config", None) is None:
            logger.info("Loading site config from %s", settings.SITE_CONFIG_PATH)
            try:
                app.state.site_config = load_site_config(settings.SITE_CONFIG_PATH)
            except ConfigError as e:
                logger.error("Site config cannot be loaded, refusing to start: %s", e)
                raise
        yield

    app = FastAPI(
        title=settings.APP_NAME,
        description="站点配置 API (只读)",
        version=settings.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.site_config = site_config

    # Include routers
    app.include_router(site.router, prefix=settings.API_V1_PREFIX)

    @app.get("/")
    def root():
        return {"message": "Welcome to Site Config API", "docs": "/docs"}

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    return app


app = create_app()
