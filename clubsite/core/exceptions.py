"""Erros da aplicação e handlers que os convertem em respostas JSON"""
from typing import List, Optional
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from clubsite.core.config import settings

logger = logging.getLogger(__name__)


class ClubSiteError(Exception):
    """Erro base; cada subclasse define o status HTTP"""
    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ClubSiteError):
    """Entrada ausente, malformada ou fora do enum"""
    status_code = 400

    def __init__(self, message: str = "Validation failed", errors: Optional[List[dict]] = None):
        super().__init__(message)
        self.errors = errors or []

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError) -> "ValidationError":
        return cls(errors=format_errors(exc.errors()))


class ConflictError(ClubSiteError):
    """Chave única duplicada"""
    status_code = 400


class AuthError(ClubSiteError):
    """Token ausente/inválido/expirado ou credenciais ruins (401); papel insuficiente (403)"""
    status_code = 401


class NotFoundError(ClubSiteError):
    status_code = 404


def format_errors(raw_errors) -> List[dict]:
    """Converte erros do pydantic em [{field, message}]"""
    errors = []
    for error in raw_errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] == "body":
            loc = loc[1:]
        errors.append({
            "field": ".".join(loc),
            "message": error.get("msg", "Invalid value"),
        })
    return errors


async def club_site_error_handler(request: Request, exc: ClubSiteError):
    content = {"message": exc.message}
    if isinstance(exc, ValidationError):
        content["errors"] = exc.errors
    return JSONResponse(status_code=exc.status_code, content=content)


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"message": "Validation failed", "errors": format_errors(exc.errors())},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    logger.warning(f"Rate limit em {request.method} {request.url.path}: {exc.detail}")
    response = JSONResponse(
        status_code=429,
        content={"message": f"Rate limit exceeded: {exc.detail}"},
    )
    # Retry-After e X-RateLimit-* quando o limiter tem headers habilitados
    view_rate_limit = getattr(request.state, "view_rate_limit", None)
    if view_rate_limit is not None:
        response = request.app.state.limiter._inject_headers(response, view_rate_limit)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Erro não tratado em {request.method} {request.url.path}: {exc}")
    content = {"message": "Server error"}
    # TODO: desligar EXPOSE_ERROR_DETAILS por padrão em produção
    if settings.EXPOSE_ERROR_DETAILS:
        content["error"] = str(exc)
    return JSONResponse(status_code=500, content=content)


def register_exception_handlers(app: FastAPI):
    """Registra o mapeamento tipo de erro -> status HTTP"""
    app.add_exception_handler(ClubSiteError, club_site_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
