"""
Tracker page routes.

Routes:
- GET / - Fresh page (a reload starts over on the add tab)
- GET /tracker - Render the outcome of the last action (a reload starts over)
- POST /tracker/tab - Switch tab, keeping unsaved form input
- POST /tracker/submit - Validate and submit the add form
- POST /tracker/refresh - Re-fetch the table
- POST /tracker/reset - Clear the add form

Dependencies: fastapi, jinja2, httpx, job_tracker.presentation
System role: Tracker page HTTP surface
"""

from pathlib import Path
import time
from typing import AsyncIterator

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
import httpx

from job_tracker.api.deps import get_service_cache, get_settings_dependency
from job_tracker.configs import Settings
from job_tracker.core.job_schema import JOB_FIELDS
from job_tracker.observability.correlation import get_correlation_id
from job_tracker.observability.middleware import CORRELATION_HEADER
from job_tracker.presentation.api_client import TrackerApiClient
from job_tracker.presentation.controller import TrackerController
from job_tracker.presentation.form import collect_form_values
from job_tracker.presentation.session_store import TrackerSessionStore
from job_tracker.presentation.state import Tab, TrackerState
from job_tracker.presentation.table import format_display_date, status_style

TEMPLATES_DIR = Path(__file__).parent / "templates"
STATIC_DIR = Path(__file__).parent / "static"

# Base URL used when the handlers are called in-process
IN_PROCESS_BASE_URL = "http://job-tracker.internal"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["display_date"] = format_display_date
templates.env.filters["status_style"] = status_style

router = APIRouter(tags=["tracker"])


def get_session_store() -> TrackerSessionStore:
    """Get the shared tracker session store."""
    return get_service_cache().session_store


async def get_tracker_api(
    request: Request,
    settings: Settings = Depends(get_settings_dependency),
) -> AsyncIterator[TrackerApiClient]:
    """
    Yield a handler client for the duration of one page request.

    Without a configured base URL the handlers of this same application
    are called in-process through the ASGI transport.
    """
    headers = {CORRELATION_HEADER: get_correlation_id()}
    base_url = settings.tracker_ui.api_base_url
    if base_url:
        http = httpx.AsyncClient(base_url=base_url, headers=headers)
    else:
        http = httpx.AsyncClient(
            transport=httpx.ASGITransport(app=request.app),
            base_url=IN_PROCESS_BASE_URL,
            headers=headers,
        )
    async with http:
        yield TrackerApiClient(http)


def _controller(
    state: TrackerState, api: TrackerApiClient, settings: Settings
) -> TrackerController:
    return TrackerController(
        state=state,
        api=api,
        banner_seconds=settings.tracker_ui.banner_seconds,
    )


def _render(
    request: Request, session_key: str, state: TrackerState, settings: Settings
) -> HTMLResponse:
    now = time.monotonic()
    banner = state.visible_banner(now)
    response = templates.TemplateResponse(
        request,
        "tracker.html",
        {
            "state": state,
            "fields": JOB_FIELDS,
            "banner": banner,
            "banner_remaining_ms": int(banner.remaining(now) * 1000) if banner else 0,
            "date_format": settings.tracker_ui.date_display_format,
            "sheet_date_formats": settings.tracker_ui.sheet_date_formats,
        },
    )
    _set_session_cookie(response, session_key, settings)
    return response


def _back_to_page(
    session_key: str, state: TrackerState, settings: Settings
) -> RedirectResponse:
    state.render_pending = True
    response = RedirectResponse(url="/tracker", status_code=303)
    _set_session_cookie(response, session_key, settings)
    return response


def _set_session_cookie(response, session_key: str, settings: Settings) -> None:
    response.set_cookie(
        settings.tracker_ui.session_cookie,
        session_key,
        httponly=True,
        samesite="lax",
    )


def _resume(
    request: Request, store: TrackerSessionStore, settings: Settings
) -> tuple[str, TrackerState]:
    return store.get_or_create(request.cookies.get(settings.tracker_ui.session_cookie))


def _start_over(
    request: Request, store: TrackerSessionStore, settings: Settings
) -> tuple[str, TrackerState]:
    old_key = request.cookies.get(settings.tracker_ui.session_cookie)
    if old_key:
        store.discard(old_key)
    return store.create()


@router.get("/", response_class=HTMLResponse)
async def tracker_home(
    request: Request,
    store: TrackerSessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings_dependency),
) -> HTMLResponse:
    """Start a fresh page: add tab, empty form, nothing loaded."""
    session_key, state = _start_over(request, store, settings)
    return _render(request, session_key, state, settings)


@router.get("/tracker", response_class=HTMLResponse)
async def tracker_page(
    request: Request,
    store: TrackerSessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings_dependency),
) -> HTMLResponse:
    """
    Render the result of the action that redirected here.

    Only the GET following an action shows the stored state; any other
    visit, such as a reload, starts over like the home page.
    """
    session_key = request.cookies.get(settings.tracker_ui.session_cookie)
    state = store.get(session_key) if session_key else None
    if state is None or not state.render_pending:
        session_key, state = _start_over(request, store, settings)
    state.render_pending = False
    return _render(request, session_key, state, settings)


@router.post("/tracker/tab")
async def switch_tab(
    request: Request,
    tab: Tab = Form(...),
    store: TrackerSessionStore = Depends(get_session_store),
    api: TrackerApiClient = Depends(get_tracker_api),
    settings: Settings = Depends(get_settings_dependency),
) -> RedirectResponse:
    """Switch tab; form fields posted along with the switch are kept as a draft."""
    session_key, state = _resume(request, store, settings)
    form = await request.form()
    has_draft = any(field.id in form for field in JOB_FIELDS)
    draft = collect_form_values(form) if has_draft else None
    await _controller(state, api, settings).switch_tab(tab, draft)
    return _back_to_page(session_key, state, settings)


@router.post("/tracker/submit")
async def submit_entry(
    request: Request,
    store: TrackerSessionStore = Depends(get_session_store),
    api: TrackerApiClient = Depends(get_tracker_api),
    settings: Settings = Depends(get_settings_dependency),
) -> RedirectResponse:
    """Validate the add form and send it to the write handler."""
    session_key, state = _resume(request, store, settings)
    form = await request.form()
    await _controller(state, api, settings).submit(collect_form_values(form))
    return _back_to_page(session_key, state, settings)


@router.post("/tracker/refresh")
async def refresh_entries(
    request: Request,
    store: TrackerSessionStore = Depends(get_session_store),
    api: TrackerApiClient = Depends(get_tracker_api),
    settings: Settings = Depends(get_settings_dependency),
) -> RedirectResponse:
    """Re-fetch the job table."""
    session_key, state = _resume(request, store, settings)
    await _controller(state, api, settings).refresh()
    return _back_to_page(session_key, state, settings)


@router.post("/tracker/reset")
async def reset_form(
    request: Request,
    store: TrackerSessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings_dependency),
) -> RedirectResponse:
    """Clear the add form."""
    session_key, state = _resume(request, store, settings)
    state.clear_form()
    return _back_to_page(session_key, state, settings)
