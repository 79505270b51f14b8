import time
from contextlib import asynccontextmanager

import structlog
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi_injector import attach_injector

from api.routes import router
from domain.errors import DataIntegrityError, InvalidArgumentError, NotFoundError

from .di import bind_model, create_injector
from .log_config import setup_logging
from .service_factories import get_dataset_loader
from .settings import settings

load_dotenv()
setup_logging(dev_mode=settings.log_dev_mode, level=settings.log_level)
logger = structlog.get_logger("movie_recommender.api")

injector = create_injector()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # The server starts accepting requests only after this completes,
    # so no handler can observe a partially built model.
    app.state.is_ready = False
    model = await get_dataset_loader(injector).load_model()
    bind_model(injector, model)
    app.state.is_ready = True
    logger.info("Application ready", users=len(model.users), movies=len(model.movies))
    yield


app = FastAPI(title="Movie Recommender API", lifespan=lifespan)
attach_injector(app, injector)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    if request.url.path != "/health":
        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000.0, 2),
        )
    return response


def _error_response(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    logger.info("User not found", path=request.url.path, error=str(exc))
    return _error_response(404, exc)


@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    logger.info("Invalid argument", path=request.url.path, error=str(exc))
    return _error_response(400, exc)


@app.exception_handler(DataIntegrityError)
async def data_integrity_handler(request: Request, exc: DataIntegrityError):
    logger.error("Data integrity error", path=request.url.path, error=str(exc))
    return _error_response(500, exc)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception", path=request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


app.include_router(router)


@app.get("/health")
def health_check():
    return {"status": "ok"}
