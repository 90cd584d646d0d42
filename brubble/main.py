from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from brubble.analysis.router import router as search_router
from brubble.config import settings
from brubble.exception_handlers import register_exception_handlers
from brubble.http_client import close_http_client, init_http_client
from brubble.logging_config import setup_logging
from brubble.personas.router import router as personas_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    await init_http_client()
    yield
    await close_http_client()


app = FastAPI(
    title="Brubble",
    description="Cross-persona search comparison for echo chamber analysis",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.cors_origins.split(",")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(search_router, prefix="/api/v1/search", tags=["search"])
app.include_router(personas_router, prefix="/api/v1/personas", tags=["personas"])


@app.get("/api/v1/health")
async def health():
    return {"status": "healthy"}
