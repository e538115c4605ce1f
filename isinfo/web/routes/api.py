# isinfo/web/routes/api.py
"""
JSON endpoints
"""

from fastapi import APIRouter, Request

from isinfo import __version__
from isinfo.core.report import build_report

router = APIRouter()


@router.get("/api/report")
def report_json(request: Request):
    """Same content as the report page, as JSON"""
    state = request.app.state
    report = build_report(state.read_environment(), state.config)
    return report.to_dict()


@router.get("/health")
def health():
    return {"status": "ok", "version": __version__}


__all__ = ["router"]
