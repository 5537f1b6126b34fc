"""API service entry point."""

import uvicorn

from docket.config import settings


if __name__ == "__main__":
    uvicorn.run(
        "docket.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
