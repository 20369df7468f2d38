"""Static landing page served at ``/``.

The document is rendered once at import time. Every request gets the same
bytes, so the handler does no work beyond returning them.
"""

from __future__ import annotations

from dataclasses import dataclass
from html import escape

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()

REPOSITORY_URL = "https://github.com/kcearns/k8s-terraform-learning"
HEALTH_PATH = "/api/health"


@dataclass(frozen=True)
class StaticPageContent:
    title: str
    description: str
    heading: str
    body: str
    health_href: str
    health_label: str
    repository_href: str
    repository_label: str


LANDING_PAGE = StaticPageContent(
    title="FastAPI on EKS",
    description="FastAPI application deployed on AWS EKS",
    heading="\N{ROCKET} FastAPI on AWS EKS",
    body="This FastAPI application is running on Amazon EKS (Elastic Kubernetes Service)",
    health_href=HEALTH_PATH,
    health_label="Check Health",
    repository_href=REPOSITORY_URL,
    repository_label="View Repository",
)

_MAIN_STYLE = (
    "min-height:100vh;display:flex;flex-direction:column;align-items:center;"
    "justify-content:center;padding:2rem;font-family:system-ui, sans-serif"
)
_HEADING_STYLE = "font-size:3rem;margin-bottom:1rem"
_BODY_STYLE = "font-size:1.25rem;color:#666;text-align:center;max-width:600px"
_NAV_STYLE = "margin-top:2rem;display:flex;gap:1rem"
_PRIMARY_LINK_STYLE = (
    "padding:0.75rem 1.5rem;background:#0070f3;color:white;"
    "border-radius:0.5rem;text-decoration:none"
)
_SECONDARY_LINK_STYLE = (
    "padding:0.75rem 1.5rem;border:2px solid #0070f3;color:#0070f3;"
    "border-radius:0.5rem;text-decoration:none"
)


def render_page(content: StaticPageContent) -> str:
    """Render ``content`` into a complete HTML document. All text is escaped."""
    e = escape
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"<title>{e(content.title)}</title>\n"
        f'<meta name="description" content="{e(content.description)}">\n'
        "</head>\n"
        "<body>\n"
        f'<main style="{_MAIN_STYLE}">\n'
        f'<h1 style="{_HEADING_STYLE}">{e(content.heading)}</h1>\n'
        f'<p style="{_BODY_STYLE}">{e(content.body)}</p>\n'
        f'<div style="{_NAV_STYLE}">\n'
        f'<a href="{e(content.health_href)}" style="{_PRIMARY_LINK_STYLE}">'
        f"{e(content.health_label)}</a>\n"
        f'<a href="{e(content.repository_href)}" target="_blank" '
        f'rel="noopener noreferrer" style="{_SECONDARY_LINK_STYLE}">'
        f"{e(content.repository_label)}</a>\n"
        "</div>\n"
        "</main>\n"
        "</body>\n"
        "</html>\n"
    )


LANDING_HTML = render_page(LANDING_PAGE)


@router.get("/", response_class=HTMLResponse)
def landing() -> HTMLResponse:
    return HTMLResponse(LANDING_HTML)
