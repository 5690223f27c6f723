import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from .core.config import settings
from .db.base import Base
from .db.session import engine
from .api.routes import router

logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    yield

app = FastAPI(title="Famtree API", version="0.1.0", lifespan=lifespan)

app.include_router(router)
