from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse

from ..constraint import USAGE_TEXT
from ..core import MinifyService
from ..errors import MinifyError
from ..report import render_batch_report, render_error
from ..utils import run_sync

logger = logging.getLogger(__name__)

router = APIRouter(tags=["minify"])


def get_service(request: Request) -> MinifyService:
    service = getattr(request.app.state, "service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="SERVICE_UNAVAILABLE")
    return service


@router.get("/", summary="Minify a file or every file in a folder", response_class=PlainTextResponse)
async def minify(
    file: str | None = None,
    folder: str | None = None,
    service: MinifyService = Depends(get_service),
) -> PlainTextResponse:
    logger.info("Received request...")
    if folder:
        body = await _minify_folder(service, Path(folder))
    elif file:
        body = await _minify_file(service, Path(file))
    else:
        body = USAGE_TEXT
    logger.info("Sent response.")
    # Failures are reported in the body; the status stays 200.
    return PlainTextResponse(body, status_code=200)


async def _minify_file(service: MinifyService, path: Path) -> str:
    try:
        result = await run_sync(service.minify_file, path)
    except MinifyError as exc:
        return render_error(exc)
    return result.content or ""


async def _minify_folder(service: MinifyService, root: Path) -> str:
    try:
        report = await run_sync(service.minify_folder, root)
    except MinifyError as exc:
        return render_error(exc)
    return render_batch_report(report)


__all__ = ["router", "get_service"]
