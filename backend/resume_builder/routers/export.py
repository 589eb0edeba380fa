"""
Export Router - printable HTML versions of a resume
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..models import User
from ..services.auth import get_current_user
from ..services.resume_export import build_resume_document
from .resumes import get_resume_or_404

router = APIRouter(prefix="/api/resumes", tags=["Export"])
logger = logging.getLogger(__name__)


def request_origin(request: Request) -> str:
    return f"{request.url.scheme}://{request.url.netloc}"


async def export_resume(
    request: Request,
    resume_id: int,
    template: Optional[str],
    auto_print: bool,
    db: AsyncSession,
    current_user: User
) -> HTMLResponse:
    resume = await get_resume_or_404(db, resume_id, current_user.id)

    try:
        document = build_resume_document(
            resume,
            current_user,
            origin=request_origin(request),
            template=template,
            auto_print=auto_print
        )
    except Exception as e:
        logger.exception("Failed to generate document for resume %s", resume_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to generate resume document: {e}"
        )

    return HTMLResponse(
        content=document.content,
        media_type=document.media_type,
        headers={"Cache-Control": "no-cache"}
    )


@router.get("/{resume_id}/pdf-generate", response_class=HTMLResponse)
async def generate_printable_resume(
    request: Request,
    resume_id: int,
    template: Optional[str] = Query(default=None, description="Template key, e.g. modern or classic"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Render the resume as an HTML page that opens the browser's print dialog,
    from which the user saves a PDF.
    """
    return await export_resume(request, resume_id, template, True, db, current_user)


@router.get("/{resume_id}/preview", response_class=HTMLResponse)
async def preview_resume(
    request: Request,
    resume_id: int,
    template: Optional[str] = Query(default=None, description="Template key, e.g. modern or classic"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Same document as pdf-generate without the print trigger"""
    return await export_resume(request, resume_id, template, False, db, current_user)
