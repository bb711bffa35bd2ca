"""Run the API with uvicorn: ``python -m taskpace``."""

import uvicorn

from taskpace.config import settings


if __name__ == "__main__":
    uvicorn.run(
        "taskpace.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.DEBUG,
    )
