"""
Backend Entry Point
Run with: uv run python main.py
Or: uv run uvicorn siteconfig.main:app --reload
"""
import uvicorn

from siteconfig.core.config import settings
from siteconfig.core.logger import setup_logging

if __name__ == "__main__":
    setup_logging()
    uvicorn.run("siteconfig.main:app", host=settings.HOST, port=settings.PORT, reload=settings.is_development, log_config=None)
