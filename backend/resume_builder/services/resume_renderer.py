"""
Template Renderer - CanonicalRenderModel -> resume markup
"""
import logging
import re
from pathlib import Path
from typing import Dict

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..schemas.render import CanonicalRenderModel
from .resume_normalizer import DateStyle, format_date

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "modern"

# Template key -> file under templates/resumes
TEMPLATE_REGISTRY: Dict[str, str] = {
    "modern": "modern.html",
    "classic": "classic.html",
}

BRAND_COLOR = "#c8665b"
SIDEBAR_COLOR = "#f8f8fa"

_URL_PREFIX = re.compile(r"^(https?://)?(www\.)?", re.IGNORECASE)
_SAFE_LINK = re.compile(r"^https?://", re.IGNORECASE)


def display_url(url: str) -> str:
    """example.com/me instead of https://www.example.com/me"""
    if not url:
        return ""
    return _URL_PREFIX.sub("", url)


def safe_link(url: str) -> str:
    """Only http(s) links are rendered as hrefs; anything else gives ''."""
    if not url:
        return ""
    url = url.strip()
    if _SAFE_LINK.match(url):
        return url
    logger.info("Dropping course link with unsupported scheme: %r", url[:40])
    return ""


def month_year(value: str) -> str:
    return format_date(value, DateStyle.DISPLAY)


def rating_percent(rating: int) -> int:
    return max(0, min(100, int(rating) * 10))


# Jinja2 environment for resume templates
template_dir = Path(__file__).parent.parent / "templates" / "resumes"
jinja_env = Environment(
    loader=FileSystemLoader(str(template_dir)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)
jinja_env.filters["month_year"] = month_year
jinja_env.filters["display_url"] = display_url
jinja_env.filters["rating_percent"] = rating_percent
jinja_env.filters["safe_link"] = safe_link


def resolve_template_key(template_key: str) -> str:
    """Unknown keys fall back to the default template."""
    if template_key in TEMPLATE_REGISTRY:
        return template_key
    logger.info("Unknown resume template %r, using %r", template_key, DEFAULT_TEMPLATE)
    return DEFAULT_TEMPLATE


def render_resume(model: CanonicalRenderModel, template_key: str) -> str:
    """Render the resume body (no <html> shell) with the selected template."""
    key = resolve_template_key(template_key)
    template = jinja_env.get_template(TEMPLATE_REGISTRY[key])
    return template.render(
        r=model,
        info=model.personal_info,
        brand_color=BRAND_COLOR,
        sidebar_color=SIDEBAR_COLOR,
    )
