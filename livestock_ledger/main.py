from __future__ import annotations

from dotenv import load_dotenv
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .app_logging import configure_logging
from .api.v1.routers import extraction, reconciliation, registry, tables

load_dotenv()
configure_logging()

app = FastAPI(title="Livestock Ledger Backend", version=__version__)

app.add_middleware(
  CORSMiddleware,
  allow_origins=["*"],
  allow_credentials=True,
  allow_methods=["*"],
  allow_headers=["*"],
)

api_router = APIRouter(prefix="/api")
api_router.include_router(extraction.router)
api_router.include_router(tables.router)
api_router.include_router(reconciliation.router)
api_router.include_router(registry.router)

app.include_router(api_router)
