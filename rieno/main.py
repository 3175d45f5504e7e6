from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from rieno.config import load_settings
from rieno.errors import RienoError
from rieno.routers.api_router import api_router
from rieno.routers.auth_router import auth_router
from rieno.services.store import build_store
from rieno.utils.logging_utils import configure_logging, get_logger

logger = get_logger("app")


def _error(status_code, message):
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def _validation_message(exc):
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    err = errors[0]
    field = ".".join(str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path"))
    if not field:
        return "Request body is required"
    if err.get("type") == "missing":
        return f"{field} is required"
    message = str(err.get("msg", "is invalid"))
    if message.startswith("Value error, "):
        return message[len("Value error, "):]
    return f"{field}: {message}"


def create_app(settings=None, store=None):
    settings = settings or load_settings()
    configure_logging(settings)

    app = FastAPI(title="Rieno API")
    app.state.settings = settings
    app.state.store = store or build_store(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_origin_regex=settings.cors_origin_regex,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RienoError)
    async def rieno_error_handler(request: Request, exc: RienoError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return _error(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return _error(400, _validation_message(exc))

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception(f"{request.method} {request.url.path} crashed")
        return _error(500, "Internal server error")

    # Register routers
    app.include_router(auth_router)
    app.include_router(api_router)

    @app.get("/")
    def index():
        return {"message": "Welcome to Rieno API", "status": "running"}

    return app
