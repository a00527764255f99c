import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.config import settings
from app.database import engine
from app.exceptions import ServiceError
from app.logging_config import setup_logging
from app.middleware import TimingMiddleware
from app.routers import blogs, users

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
    logger.info("Blog API starting (env=%s)", settings.APP_ENV)
    yield
    # Shutdown
    await engine.dispose()

app = FastAPI(
    title="Blog API",
    description="Create, read, update, delete and search blog posts",
    version="1.0.0",
    lifespan=lifespan,
)

# Middleware
app.add_middleware(TimingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"status_code": exc.status_code, "message": exc.message},
    )

# Routers
app.include_router(blogs.router)
app.include_router(users.router)

@app.get("/health")
async def health():
    return {"status": "healthy", "version": "1.0.0"}
