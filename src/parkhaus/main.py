"""Main application entry point."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from .api.router import init_router, router
from .config import AppConfig, get_config_path, load_config
from .viewmodel import ParkingViewModel

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def resolve_config() -> AppConfig:
    """Load config/config.yaml if present, otherwise use defaults."""
    config_path = get_config_path()
    if not config_path.exists():
        logger.warning(f"Configuration file not found: {config_path}, using defaults")
        return AppConfig()

    config = load_config(config_path)
    logger.info(f"Loaded configuration from {config_path}")
    return config


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Parkhaus...")

    config = resolve_config()
    view_model = ParkingViewModel.from_config(config)
    init_router(view_model)

    logger.info(
        f"Parkhaus ready with {view_model.garage.total} slots on "
        f"http://{config.api.host}:{config.api.port}"
    )

    yield  # Application runs here

    logger.info("Shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Parkhaus",
    description="API for managing parking garage slots, park-ins and park-outs",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(router, prefix="/api/v1")


def main():
    """Run the application."""
    cfg = resolve_config()

    uvicorn.run(
        "parkhaus.main:app",
        host=cfg.api.host,
        port=cfg.api.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
