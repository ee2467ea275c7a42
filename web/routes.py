"""
web/routes.py -- Jinja2 template routes for the credportal web UI.

Routes:
  GET  /        -- home page
  GET  /signup  -- signup form
  GET  /login   -- login form
  POST /signup  -- create account, render access page
  POST /login   -- check credentials, render access page

Form posts answer failures with short plain-text bodies. Credential
rejections and server-side failures keep status 200; only a missing field
is a 400.

The store is read from request.app.state.user_store, which the application
lifespan opens on startup.
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.templating import Jinja2Templates

from accounts.service import (
    LoginError,
    MissingCredentialsError,
    SignupError,
    authenticate_user,
    register_user,
)
from accounts.store import UserStore

logger = logging.getLogger("credportal.web")

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
router = APIRouter()

INVALID_CREDENTIALS_MSG = "Invalid email or password."


def _user_store(request: Request) -> UserStore:
    return request.app.state.user_store


def _missing_fields_response(exc: MissingCredentialsError) -> PlainTextResponse:
    logger.info("Rejected form post: missing %s", ", ".join(exc.missing))
    return PlainTextResponse(str(exc), status_code=400)


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------


@router.get("/", response_class=HTMLResponse)
def home(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request, "home.html")


@router.get("/signup", response_class=HTMLResponse)
def signup_form(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request, "signup.html")


@router.get("/login", response_class=HTMLResponse)
def login_form(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request, "login.html")


# ---------------------------------------------------------------------------
# Form submissions
# ---------------------------------------------------------------------------


@router.post("/signup", response_class=HTMLResponse)
def signup_post(
    request: Request,
    email: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
):
    """Handle the signup form: hash, persist, and render the access page."""
    try:
        register_user(_user_store(request), email, password)
    except MissingCredentialsError as exc:
        return _missing_fields_response(exc)
    except SignupError as exc:
        return PlainTextResponse(str(exc))
    return templates.TemplateResponse(request, "access.html", {"email": email})


@router.post("/login", response_class=HTMLResponse)
def login_post(
    request: Request,
    email: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
):
    """Handle the login form submission."""
    try:
        record = authenticate_user(_user_store(request), email, password)
    except MissingCredentialsError as exc:
        return _missing_fields_response(exc)
    except LoginError as exc:
        return PlainTextResponse(str(exc))
    if record is None:
        return PlainTextResponse(INVALID_CREDENTIALS_MSG)
    return templates.TemplateResponse(request, "access.html", {"email": record.email})
