from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core import db, settings
from core.errors import BadRequestError, ServiceError
from orgs import router as orgs_router
from users import router as users_router

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    # One pool per process; a failed startup aborts the process.
    app.state.pool = await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool(app.state.pool)
        app.state.pool = None


app = FastAPI(lifespan=lifespan)

# Allow the browser admin client to call this API.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ServiceError)
async def service_error_handler(_: Request, exc: ServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


def bad_request_from_validation(exc: RequestValidationError) -> BadRequestError:
    errors = exc.errors()
    if any(err.get("loc", ("",))[0] == "body" for err in errors):
        return BadRequestError("Invalid JSON")
    return BadRequestError("Invalid request parameters", details=jsonable_encoder(errors))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return await service_error_handler(request, bad_request_from_validation(exc))


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


app.include_router(orgs_router.router, tags=["orgs"])
app.include_router(users_router.router, tags=["users"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "FastAPI + asyncpg running"


if __name__ == "__main__":
    import uvicorn

    configure_logging()
    uvicorn.run(app, host=settings.host(), port=settings.port())
