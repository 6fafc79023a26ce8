"""Example host application using the toolbox.

Serves a small post editor: a listing with placeholders and prices in euros,
and a listed form with inline errors and page-wide tab order.
"""
import logging
import re
import time
from datetime import datetime
from decimal import Decimal
from typing import ClassVar, Dict, FrozenSet, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, Field
from starlette.middleware.sessions import SessionMiddleware

from .core.config import Config
from .core.integration import setup
from .core.middleware import global_exception_handler, log_requests
from .models import Record, validates_email_format_of


logger = logging.getLogger(__name__)

_NESTED_PARAM = re.compile(r"^(?P<object>\w+)\[(?P<field>\w+)\]$")


class Post(BaseModel):
    protected_attributes: ClassVar[FrozenSet[str]] = frozenset({"created_at"})

    title: str = Field(min_length=3, max_length=80)
    body: str = ""
    author_email: str
    price: Decimal = Field(default=Decimal("0"), ge=0)
    published: bool = False
    created_at: Optional[datetime] = None

    check_author_email = validates_email_format_of("author_email")


POSTS: Dict[int, Post] = {}


def nested_params(form, object_name: str) -> Dict[str, str]:
    """``{"post[title]": "x"}`` -> ``{"title": "x"}``; the last value of a key wins."""
    params: Dict[str, str] = {}
    for key, value in form.multi_items():
        match = _NESTED_PARAM.match(key)
        if match and match.group("object") == object_name:
            params[match.group("field")] = value
    return params


# Initialize FastAPI
app = FastAPI(title="Toolbox example")
templates = Jinja2Templates(directory=Config.TEMPLATES_DIR)

app.add_middleware(SessionMiddleware, secret_key=Config.SECRET_KEY or "development-only-secret")


@app.middleware("http")
async def _log_requests(request, call_next):
    return await log_requests(request, call_next)


@app.exception_handler(Exception)
async def _global_exception_handler(request, exc):
    return await global_exception_handler(request, exc)


setup(app, templates)


@app.get("/health")
async def health_check():
    """Basic health check: configuration is valid and templates load."""
    health_start_time = time.time()

    try:
        Config.validate()
        templates.get_template("posts/new.html")
        health_duration = time.time() - health_start_time

        return {
            "status": "healthy",
            "service": "webtoolbox-example",
            "timestamp": datetime.now().isoformat(),
            "response_time_ms": round(health_duration * 1000, 2),
        }
    except Exception as e:
        health_duration = time.time() - health_start_time
        logger.error(f"Health check failed: {str(e)} - Duration: {health_duration:.1f}s")

        return {
            "status": "unhealthy",
            "service": "webtoolbox-example",
            "timestamp": datetime.now().isoformat(),
            "error": str(e),
            "response_time_ms": round(health_duration * 1000, 2),
        }


@app.get("/posts", response_class=HTMLResponse)
async def list_posts(request: Request):
    return templates.TemplateResponse(request, "posts/index.html", {"posts": list(POSTS.values())})


@app.get("/posts/new", response_class=HTMLResponse)
async def new_post(request: Request):
    return templates.TemplateResponse(request, "posts/new.html", {"post": Record(Post)})


@app.post("/posts", response_class=HTMLResponse)
async def create_post(request: Request):
    form = await request.form()
    post = Record(Post)
    if not post.update_attributes(nested_params(form, "post")):
        logger.info(f"Rejected post: {post.errors.full_messages()}")
        return templates.TemplateResponse(request, "posts/new.html", {"post": post})

    post_id = len(POSTS) + 1
    POSTS[post_id] = post.instance.model_copy(update={"created_at": datetime.now()})
    return RedirectResponse(url=f"/posts/{post_id}", status_code=303)


@app.get("/posts/{post_id}", response_class=HTMLResponse)
async def show_post(request: Request, post_id: int):
    post = POSTS.get(post_id)
    if post is None:
        raise HTTPException(status_code=404, detail=f"Post not found: {post_id}")
    return templates.TemplateResponse(request, "posts/show.html", {"post": post})


@app.post("/login")
async def login(request: Request):
    form = await request.form()
    user = form.get("login")
    if not user:
        raise HTTPException(status_code=422, detail="login is required")
    request.session[Config.SESSION_USER_KEY] = user
    return RedirectResponse(url="/posts", status_code=303)


@app.post("/logout")
async def logout(request: Request):
    request.session.pop(Config.SESSION_USER_KEY, None)
    return RedirectResponse(url="/posts", status_code=303)


@app.get("/")
async def root():
    """Return basic API information."""

    return {
        "service": "Toolbox example",
        "version": "1.0",
        "endpoints": {
            "posts": "/posts",
            "new_post": "/posts/new",
            "health": "/health",
        },
        "timestamp": datetime.now().isoformat(),
    }
