import logging

from fastapi import FastAPI

from archmodel import config
from archmodel.api.routes import router

logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

app = FastAPI(
    title="Architecture Workspace Publisher",
    version="0.1.0",
)

app.include_router(router)
