from .auth import (
    verify_password,
    get_password_hash,
    create_access_token,
    get_current_user,
    authenticate_user,
    oauth2_scheme
)
from .profile_picture import (
    PictureSource,
    ResolvedPicture,
    classify_profile_picture,
    resolve_profile_picture
)
from .resume_normalizer import (
    DateStyle,
    format_date,
    normalize_resume,
    select_template_key
)
from .resume_renderer import (
    DEFAULT_TEMPLATE,
    TEMPLATE_REGISTRY,
    render_resume
)
from .print_document import (
    PrintDocument,
    assemble_print_document
)
from .resume_export import build_resume_document

__all__ = [
    # Auth
    "verify_password",
    "get_password_hash",
    "create_access_token",
    "get_current_user",
    "authenticate_user",
    "oauth2_scheme",
    # Profile pictures
    "PictureSource",
    "ResolvedPicture",
    "classify_profile_picture",
    "resolve_profile_picture",
    # Normalization
    "DateStyle",
    "format_date",
    "normalize_resume",
    "select_template_key",
    # Rendering
    "DEFAULT_TEMPLATE",
    "TEMPLATE_REGISTRY",
    "render_resume",
    "PrintDocument",
    "assemble_print_document",
    "build_resume_document"
]
