import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from access_control.app.errors import ErrorKind, StorageError, kind_of

from .error import STATUS_BY_KIND, ClientError, ServerError

logger = logging.getLogger(__name__)

FORBIDDEN_MESSAGE = "Access denied"


def _error_body(code: str, kind: ErrorKind, message: str) -> dict:
    return {"error": {"code": code, "kind": kind.value, "message": message}}


async def handle_client_error(request: Request, exc: ClientError):
    error = exc.base_error
    kind = kind_of(error)
    logger.warning(
        f"Client error on {request.method} {request.url.path}: {error.code} ({error.message})"
    )
    # Forbidden details stay in the log
    message = FORBIDDEN_MESSAGE if kind == ErrorKind.forbidden else error.message
    return JSONResponse(
        status_code=exc.status_code, content=_error_body(error.code, kind, message)
    )


async def handle_server_error(request: Request, exc: ServerError):
    error = exc.base_error
    logger.error(f"Server error on {request.method} {request.url.path}: {error.code}")
    return JSONResponse(
        status_code=STATUS_BY_KIND[ErrorKind.upstream],
        content=_error_body(error.code, ErrorKind.upstream, error.message),
    )


async def handle_storage_error(request: Request, exc: StorageError):
    error = exc.error
    kind = kind_of(error)
    if kind == ErrorKind.upstream:
        logger.error(f"Storage unavailable on {request.method} {request.url.path}: {error.message}")
    else:
        logger.warning(f"Storage rejected {request.method} {request.url.path}: {error.code}")
    return JSONResponse(
        status_code=STATUS_BY_KIND[kind], content=_error_body(error.code, kind, error.message)
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    logger.warning(f"Validation error on {request.method} {request.url.path}: {details}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("VALIDATION_ERROR", ErrorKind.bad_request, details or "Invalid request"),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=STATUS_BY_KIND[ErrorKind.internal],
        content=_error_body("INTERNAL_ERROR", ErrorKind.internal, "Internal server error"),
    )


def create_app(ApplicationConfig) -> FastAPI:
    app = FastAPI(title="Company Access Service", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from access_control.api.routes import auth, company, health_check, invitation, user

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(user.router, prefix=prefix, tags=["User"])
    app.include_router(invitation.router, prefix=prefix, tags=["Invitations"])
    app.include_router(company.router, prefix=prefix, tags=["Company"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(StorageError, handle_storage_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
