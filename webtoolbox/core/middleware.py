import logging
import time
from typing import Callable

from fastapi import Request
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..forms.context import page_render
from .config import Config


logger = logging.getLogger(__name__)

# status codes answered with a static page from Config.PUBLIC_DIR
STATIC_ERROR_PAGES = (404, 422)


async def tab_order_scope(request: Request, call_next: Callable):
    """Give every request its own page-wide tab order."""
    with page_render():
        return await call_next(request)


async def log_requests(request: Request, call_next: Callable):
    start_time = time.time()
    request_id = f"{int(time.time() * 1000)}-{id(request)}"

    try:
        response = await call_next(request)
        process_time = time.time() - start_time
        # Only log slow requests (>1s) or errors
        if process_time > 1.0 or response.status_code >= 400:
            logger.info(f"[{request_id}] {request.method} {request.url.path} - {response.status_code} - {process_time:.2f}s")
        return response
    except Exception as e:
        process_time = time.time() - start_time
        logger.error(f"[{request_id}] {request.method} {request.url.path} - ERROR: {str(e)} - {process_time:.2f}s")
        raise


async def static_error_page_handler(request: Request, exc: StarletteHTTPException):
    """Answer 404 and 422 with ``public/<code>.html`` when that page exists."""
    if exc.status_code in STATIC_ERROR_PAGES:
        page = Config.public_path(f"{exc.status_code}.html")
        if page.is_file():
            return HTMLResponse(page.read_text(encoding="utf-8"), status_code=exc.status_code)
        logger.warning(f"No static error page at {page}, falling back to JSON")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=getattr(exc, "headers", None))


async def global_exception_handler(request: Request, exc: Exception):
    request_id = f"{int(time.time() * 1000)}-{id(request)}"
    logger.error(f"[{request_id}] Unhandled exception in {request.method} {request.url.path}: {str(exc)}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})
