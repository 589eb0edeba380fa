"""
Print Document Assembler - wraps rendered resume markup in a printable page
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from ..config import get_settings
from .resume_renderer import BRAND_COLOR

settings = get_settings()

HTML_MEDIA_TYPE = "text/html"

template_dir = Path(__file__).parent.parent / "templates"
jinja_env = Environment(
    loader=FileSystemLoader(str(template_dir)),
    autoescape=select_autoescape(["html"]),
)


@dataclass(frozen=True)
class PrintDocument:
    content: str
    media_type: str = HTML_MEDIA_TYPE


def assemble_print_document(
    body_html: str,
    title: str,
    auto_print: bool = True,
    print_delay_ms: Optional[int] = None
) -> PrintDocument:
    """
    Build the standalone HTML page served to the browser.

    The print dialog is opened after a fixed delay so that images and fonts
    have time to load; there is no load-complete signal. The delay defaults
    to settings.print_delay_ms.
    """
    if print_delay_ms is None:
        print_delay_ms = settings.print_delay_ms

    template = jinja_env.get_template("print_document.html")
    html_content = template.render(
        title=title or "Untitled",
        body=Markup(body_html),
        auto_print=auto_print,
        print_delay_ms=max(0, int(print_delay_ms)),
        brand_color=BRAND_COLOR,
    )
    return PrintDocument(content=html_content)
