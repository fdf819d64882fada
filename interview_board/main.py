import logging
import os
import sys
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from interview_board.api.routes import router as api_router
from interview_board.config.dependencies import close_resources, get_interview_store
from interview_board.config.settings import get_settings
from interview_board.middlewares.request_logging_middleware import RequestLoggingMiddleware
from interview_board.services.interview_store import InterviewStore
from interview_board.utils.log_sanitizer import sanitize_log_input

# Load .env
load_dotenv()

# ============================================================================
# Logging setup
# ============================================================================


def setup_logging():
    """Send application and uvicorn logs to stdout in one format"""
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level, logging.INFO))

    # Drop existing handlers (avoid duplicates)
    root_logger.handlers.clear()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(getattr(logging, log_level, logging.INFO))
    stdout_handler.setFormatter(logging.Formatter(log_format, datefmt=date_format))
    root_logger.addHandler(stdout_handler)

    for logger_name in ["uvicorn", "uvicorn.error", "uvicorn.access"]:
        logger = logging.getLogger(logger_name)
        logger.handlers.clear()
        logger.addHandler(stdout_handler)
        logger.setLevel(logging.INFO)

    app_logger = logging.getLogger("interview_board")
    app_logger.setLevel(getattr(logging, log_level, logging.INFO))

    return root_logger


setup_logging()

logger = logging.getLogger(__name__)
logger.info("Interview Board logging initialized")
logger.info(f"   Log level: {os.getenv('LOG_LEVEL', 'INFO')}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info(f"Starting Interview Board ({settings.environment})")
    yield
    logger.info("Closing LLM client...")
    await close_resources()


app = FastAPI(
    title="Interview Board API",
    description="Weekly interview calendar with AI-assisted form parsing",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Log the request body of 422 responses"""
    try:
        body = await request.body()
        body_str = body.decode("utf-8")[:2000]
    except Exception:
        body_str = "[failed to read body]"

    logger.error("[422 Validation Error]")
    logger.error(f"   URL: {request.url}")
    logger.error(f"   Method: {request.method}")
    logger.error(f"   Body: {sanitize_log_input(body_str)}")
    logger.error(f"   Errors: {exc.errors()}")

    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    """Validation errors with non-serializable context (exceptions) stringified"""
    errors = []
    for error in exc.errors():
        error = dict(error)
        if "ctx" in error:
            error["ctx"] = {k: str(v) for k, v in error["ctx"].items()}
        errors.append(error)
    return errors


app.include_router(api_router)


@app.get("/", tags=["Root"])
async def root():
    """API overview"""
    return {
        "message": "Welcome to Interview Board API",
        "version": "1.0.0",
        "docs": "/docs",
        "redoc": "/redoc",
        "api_list": [
            {"endpoint": "GET /api/interviews"},
            {"endpoint": "POST /api/interviews"},
            {"endpoint": "GET /api/interviews/{id}"},
            {"endpoint": "PATCH /api/interviews/{id}"},
            {"endpoint": "DELETE /api/interviews/{id}"},
            {"endpoint": "GET /api/calendar/week"},
            {"endpoint": "GET /api/form/draft"},
            {"endpoint": "GET /api/form/options"},
            {"endpoint": "POST /api/interview-parser"},
        ],
    }


@app.get("/health", tags=["Health"])
async def health_check(store: InterviewStore = Depends(get_interview_store)):
    """Service health, including whether the storage backend is writable"""
    return {
        "status": "healthy",
        "service": "interview-board",
        "version": "1.0.0",
        "storage": store.storage.storage_name,
        "storage_writable": store.storage.health_check(),
        "interviews": len(store),
    }


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "interview_board.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.is_development,
        log_level="info",
    )
