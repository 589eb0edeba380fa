"""
Resume export pipeline: resolve picture, normalize, render, assemble.
"""
import logging
from typing import Optional

from ..config import get_settings
from .profile_picture import resolve_profile_picture
from .resume_normalizer import normalize_resume, select_template_key
from .resume_renderer import render_resume
from .print_document import PrintDocument, assemble_print_document

logger = logging.getLogger(__name__)
settings = get_settings()


def build_resume_document(
    resume,
    owner,
    origin: str,
    template: Optional[str] = None,
    auto_print: bool = True
) -> PrintDocument:
    """
    Produce the printable HTML document for a resume.

    Args:
        resume: Resume with collections loaded; ownership is checked by the caller
        owner: The resume's User, used for personal-info fallbacks
        origin: Scheme and host of the request, for legacy picture paths
        template: Template requested by the client, if any
        auto_print: Include the delayed window.print() call
    """
    picture = resolve_profile_picture(resume.profile_picture, origin)
    model = normalize_resume(resume, owner, profile_picture=picture.url)

    template_key = select_template_key(template, resume.template, settings.default_template)
    logger.debug(
        "Rendering resume %s with template %r (picture: %s, %d skills, %d jobs)",
        resume.id, template_key, picture.source.value,
        len(model.strengths), len(model.work_experience)
    )

    body_html = render_resume(model, template_key)
    return assemble_print_document(body_html, model.title, auto_print=auto_print)
