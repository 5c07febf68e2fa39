"""
Results Router - Proxied endpoints of the BPUT results portal.

Each endpoint maps a GET with query parameters onto one form-encoded call to
the portal, translating short session codes (``E24``) into the display names
the portal's forms expect. Errors are raised as ProxyError subclasses and
turned into responses by the handlers registered in ``api.main``.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response

from portal import DETAILS_PATH, EXAM_LIST_PATH, SGPA_PATH, SUBJECTS_PATH, PortalClient
from resultproxy.errors import MissingParameterError, UpstreamError
from resultproxy.models import UpstreamResult
from resultproxy.rendering import parse_subject_rows, render_results_table
from resultproxy.scraping import scrape_sessions
from resultproxy.sessions import SessionCodeTable

from ..dependencies import get_app_settings, get_portal_client, get_session_table
from ..settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["results"])

DEFAULT_SEMID = "4"
DEFAULT_SESSION = "E24"
# Placeholder the portal accepts when the caller does not know the birth date
DEFAULT_DOB = "2009-07-14"

HTML_FLAG = "html"


def require_rollno(rollno: str | None) -> str:
    """Return the roll number, or raise if it is missing or empty."""
    if not rollno:
        raise MissingParameterError("rollno")
    return rollno


def unwrap(result: UpstreamResult) -> Any:
    """Return the payload of a successful upstream result."""
    if not result.ok:
        raise UpstreamError(result.error or "Upstream request failed")
    return result.payload


def semester_params(roll_no: str, semid: str | None, session: str | None, table: SessionCodeTable) -> dict[str, str]:
    """Form fields shared by the subjects-list and SGPA endpoints."""
    return {
        "rollNo": roll_no,
        "semid": semid or DEFAULT_SEMID,
        "session": table.to_display_name(session or DEFAULT_SESSION),
    }


@router.get("/", response_class=HTMLResponse)
async def home(
    client: PortalClient = Depends(get_portal_client),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """Serve the static front page."""
    result = await client.fetch_text(settings.template_url)
    if not result.ok:
        return PlainTextResponse(f"Error: {result.error}", status_code=500)
    return HTMLResponse(result.payload)


@router.get("/details")
async def details(
    rollno: str | None = None,
    client: PortalClient = Depends(get_portal_client),
) -> JSONResponse:
    """Student profile details."""
    roll_no = require_rollno(rollno)
    result = await client.call(DETAILS_PATH, {"rollNo": roll_no})
    return JSONResponse(unwrap(result))


@router.get("/results")
async def results(
    request: Request,
    rollno: str | None = None,
    semid: str | None = None,
    session: str | None = None,
    client: PortalClient = Depends(get_portal_client),
    table: SessionCodeTable = Depends(get_session_table),
) -> Response:
    """Subject-wise grades for one semester.

    Returns the portal's JSON unless the ``html`` query key is present
    (any value), in which case the rows are rendered as an HTML table.
    """
    roll_no = require_rollno(rollno)
    params = semester_params(roll_no, semid, session, table)
    payload = unwrap(await client.call(SUBJECTS_PATH, params))

    if HTML_FLAG in request.query_params:
        rows = parse_subject_rows(payload)
        logger.debug(f"Rendering {len(rows)} result rows as HTML for {roll_no}")
        return HTMLResponse(render_results_table(rows))

    return JSONResponse(payload)


@router.get("/examinfo")
async def exam_info(
    rollno: str | None = None,
    dob: str | None = None,
    session: str | None = None,
    client: PortalClient = Depends(get_portal_client),
    table: SessionCodeTable = Depends(get_session_table),
) -> JSONResponse:
    """List of exams the student sat in a session."""
    roll_no = require_rollno(rollno)
    params = {
        "rollNo": roll_no,
        "dob": dob or DEFAULT_DOB,
        "session": table.to_display_name(session or DEFAULT_SESSION),
    }
    result = await client.call(EXAM_LIST_PATH, params)
    return JSONResponse(unwrap(result))


@router.get("/sgpa")
async def sgpa(
    rollno: str | None = None,
    semid: str | None = None,
    session: str | None = None,
    client: PortalClient = Depends(get_portal_client),
    table: SessionCodeTable = Depends(get_session_table),
) -> JSONResponse:
    """Semester grade point average."""
    roll_no = require_rollno(rollno)
    result = await client.call(SGPA_PATH, semester_params(roll_no, semid, session, table))
    return JSONResponse(unwrap(result))


@router.get("/allsession")
async def all_sessions(
    client: PortalClient = Depends(get_portal_client),
    table: SessionCodeTable = Depends(get_session_table),
    settings: Settings = Depends(get_app_settings),
) -> JSONResponse:
    """Sessions currently offered in the portal's dropdown."""
    markup = unwrap(await client.fetch_text(settings.landing_page_url))
    listings = scrape_sessions(markup, table)
    logger.debug(f"Scraped {len(listings)} sessions from landing page")
    return JSONResponse([listing.model_dump(by_alias=True) for listing in listings])
