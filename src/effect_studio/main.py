"""FastAPI application entry point."""

from fastapi import FastAPI

from .config import StudioConfig, load_config
from .dependencies import include_routers
from .logging import configure_logging


def create_app(config: StudioConfig | None = None) -> FastAPI:
    """Build FastAPI instance with configured dependencies."""
    cfg = config or load_config()
    configure_logging(cfg.log_level)
    app = FastAPI(title="Effect Studio")
    include_routers(app, cfg)
    return app


app = create_app()
