import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sitecms.config import settings
from sitecms.database import init_models
from sitecms.exceptions import InternalStoreError
from sitecms.middleware import RequestLogMiddleware
from sitecms.routers import blog, catalog, contact, faqs, gallery, pages
from sitecms.schemas import HealthResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings.CREATE_SCHEMA:
        await init_models()
    logger.info("Site content API started (env=%s)", settings.APP_ENV)
    yield


app = FastAPI(
    title="Site Content API",
    description="Content backend for a small business website",
    version="1.0.0",
    lifespan=lifespan,
)

# Middleware
app.add_middleware(RequestLogMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InternalStoreError)
async def internal_store_error_handler(request: Request, exc: InternalStoreError):
    # Details stay in the log; callers get an opaque failure.
    logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


# Routers
app.include_router(pages.router)
app.include_router(catalog.router)
app.include_router(gallery.router)
app.include_router(blog.router)
app.include_router(faqs.router)
app.include_router(contact.router)


@app.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok", timestamp=datetime.now(timezone.utc))
