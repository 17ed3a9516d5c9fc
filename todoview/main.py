import logging

import uvicorn
from fastapi import FastAPI

from todoview.config import get_settings
from todoview.routers.todos import router as todos_router

app = FastAPI(title="Todoview", version="0.1.0")
app.include_router(todos_router)


def run():
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info("Using todo service at %s", settings.collection_url)
    uvicorn.run(
        "todoview.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
