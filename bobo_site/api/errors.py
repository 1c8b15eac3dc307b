# File: bobo_site/api/errors.py

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from bobo_site.core.exceptions import SiteError, StorageFault


def register_exception_handlers(app: FastAPI) -> None:
    """
    Answer SiteError subclasses with {"detail": ...}, like HTTPException does.
    """

    @app.exception_handler(StorageFault)
    async def storage_fault_handler(request: Request, exc: StorageFault):
        logger.opt(exception=exc).error(
            f"Storage fault | path={request.url.path} | operation={exc.operation}"
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal storage error"},
        )

    @app.exception_handler(SiteError)
    async def site_error_handler(request: Request, exc: SiteError):
        logger.warning(
            f"{type(exc).__name__} | path={request.url.path} | message={exc.message}"
        )
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})
