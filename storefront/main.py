# storefront/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from storefront.api import create_app
from storefront.data.database import Base, engine
from storefront.data import models  # noqa: F401  rejestracja tabel w Base.metadata
from storefront.utils.settings import AUTO_CREATE_TABLES
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    #w Supabase tabele juz istnieja, create_all tylko dla lokalnej bazy
    if AUTO_CREATE_TABLES:
        logger.info(f"Creating tables: {list(Base.metadata.tables.keys())}")
        Base.metadata.create_all(bind=engine)
    yield


app = create_app(lifespan=lifespan)

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
