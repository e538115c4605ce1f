# isinfo/web/routes/pages.py
"""
Report page
"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from isinfo.core.report import build_report

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def report_page(request: Request):
    """Read the environment once and render the report"""
    state = request.app.state
    snapshot = state.read_environment()
    report = build_report(snapshot, state.config)
    return HTMLResponse(state.renderer.render(report))


__all__ = ["router"]
