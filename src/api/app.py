from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from src.app.errors import ErrorCode
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code} {exc.base_error.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    details = [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    ]
    error_dict = {"code": ErrorCode.VALIDATION_ERROR, "message": "; ".join(details)}
    logger.warning(f"Validation error: {error_dict}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content={"error": error_dict}
    )


def create_app(ApplicationConfig) -> FastAPI:
    logging.basicConfig(level=ApplicationConfig.LOG_LEVEL)

    app = FastAPI(title="Onboarding API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import assignments, audit, employees, health_check, invitations, me, tasks

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(employees.router, tags=["Employees"])
    app.include_router(me.router, tags=["Me"])
    app.include_router(assignments.router, tags=["Assignments"])
    app.include_router(tasks.router, tags=["Tasks"])
    app.include_router(invitations.router, tags=["Invitations"])
    app.include_router(audit.router, tags=["Audit"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)

    return app
