from fastapi import FastAPI
from app.config import settings
from app.logging_config import get_logger, setup_logging
from app.api import routes

# Initialize logging
setup_logging(settings.log_level, debug=settings.debug, app_name=settings.app_name)
logger = get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    debug=settings.debug
)

# Include routers
app.include_router(routes.router)

logger.info("app_initialized", app=settings.app_name, country_code=settings.country_code)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
