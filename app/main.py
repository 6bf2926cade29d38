from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse
from loguru import logger

from app.dependencies import close_providers, get_config
from app.routers import frames, selection
from app.services.frame_services import error_response
from ytframes.exceptions import YTFramesException
from ytframes.utils.logging_config import log_manager

SERVICE_FAILURE_DETAILS = "Service is not configured correctly. Check provider settings."

ENDPOINTS = {
    "extract": "POST /extract-frame",
    "extractMultiple": "POST /extract-frames-multiple",
    "extractBoth": "POST /extract-frames-both",
    "saveSelection": "POST /save-selection",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = get_config()
    log_manager.configure(
        level=config.logging.level,
        log_file=config.logging.file if config.logging.enable_file else None,
        max_file_size=config.logging.max_file_size,
        retention_days=config.logging.retention_days,
    )
    logger.info(f"{config.app_name} ready, endpoints: {', '.join(ENDPOINTS.values())}")
    yield
    await close_providers()


app = FastAPI(
    title="YouTube Frame Extraction API",
    description="Extract, crop and save still frames from YouTube videos",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=True
)

app.include_router(frames.router)
app.include_router(selection.router)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are client errors with the same shape as other rejections."""
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ())[1:]) or 'body'}: {error.get('msg')}"
        for error in errors
    ) or "Invalid request body"
    logger.warning(f"Invalid request to {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(YTFramesException)
async def service_exception_handler(request: Request, exc: YTFramesException):
    """Failures raised while building route dependencies, before a service can map them."""
    return error_response(exc, SERVICE_FAILURE_DETAILS)


def custom_openapi():
    """Generate custom OpenAPI schema."""
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title="YouTube Frame Extraction API",
        version="1.0.0",
        description="""
        Extracts still frames from YouTube videos at fixed points of their duration.

        - **Single frame**: one frame at 65% (or a given second), returned as JPEG
        - **Multiple frames**: 50%, 65% and 75%, returned as base64 JSON
        - **Frame grid**: 24 frames in portrait 4:5 and landscape crops
        - **Selection**: upload a chosen pair and log it to a spreadsheet

        Requires `yt-dlp` (installed as a library) and the `ffmpeg` binary on the host.
        """,
        routes=app.routes,
        tags=[
            {
                "name": "frames",
                "description": "Frame extraction and cropping"
            },
            {
                "name": "selection",
                "description": "Media store upload and spreadsheet logging"
            }
        ]
    )

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi


@app.get("/", tags=["root"])
async def root():
    """Root endpoint providing API information."""
    return {
        "status": "online",
        "message": "YouTube Frame Extraction API",
        "endpoints": ENDPOINTS,
    }


@app.get("/health", tags=["health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "ytframes"}


def run():
    import uvicorn

    config = get_config()
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    run()
