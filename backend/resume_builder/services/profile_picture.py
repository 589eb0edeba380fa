"""
Profile picture resolution for server-side rendering.

Resumes have stored their picture in several ways over time: inline data
URIs, absolute URLs, files under /uploads and ids of images that only live in
the browser's localStorage. Everything that renders a picture goes through
resolve_profile_picture().
"""
import enum
import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

DATA_URI_PREFIX = "data:"
ABSOLUTE_URL_PREFIX = "http"
CLIENT_LOCAL_PREFIX = "profile_"
UPLOADS_PREFIX = "/uploads/"
LEGACY_PICTURES_PATH = "/uploads/profile-pictures/"


class PictureSource(str, enum.Enum):
    NONE = "none"
    DATA_URI = "data_uri"
    ABSOLUTE_URL = "absolute_url"
    CLIENT_LOCAL = "client_local"  # browser localStorage id, not reachable from the server
    LEGACY_PATH = "legacy_path"


@dataclass(frozen=True)
class ResolvedPicture:
    source: PictureSource
    url: Optional[str] = None

    @property
    def available(self) -> bool:
        return self.url is not None


def classify_profile_picture(reference: Optional[str]) -> PictureSource:
    """Classify a stored reference by its prefix. Order matters."""
    reference = (reference or "").strip()
    if not reference:
        return PictureSource.NONE
    if reference.startswith(DATA_URI_PREFIX):
        return PictureSource.DATA_URI
    if reference.startswith(ABSOLUTE_URL_PREFIX):
        return PictureSource.ABSOLUTE_URL
    if reference.startswith(CLIENT_LOCAL_PREFIX):
        return PictureSource.CLIENT_LOCAL
    return PictureSource.LEGACY_PATH


def _legacy_url(reference: str, origin: str) -> str:
    base = origin.rstrip("/")
    if reference.startswith(UPLOADS_PREFIX):
        return f"{base}{reference}"
    return f"{base}{LEGACY_PICTURES_PATH}{reference}"


def resolve_profile_picture(reference: Optional[str], origin: str) -> ResolvedPicture:
    """
    Turn a stored profile picture reference into something markup can use.

    Args:
        reference: Value of Resume.profile_picture
        origin: Scheme and host of the current request, e.g. "https://host"

    Returns:
        ResolvedPicture with url=None when there is nothing to show
    """
    reference = (reference or "").strip()
    source = classify_profile_picture(reference)

    if source in (PictureSource.DATA_URI, PictureSource.ABSOLUTE_URL):
        return ResolvedPicture(source, reference)
    if source == PictureSource.LEGACY_PATH:
        url = _legacy_url(reference, origin)
        logger.debug("Converted legacy profile picture path to %s", url)
        return ResolvedPicture(source, url)
    if source == PictureSource.CLIENT_LOCAL:
        logger.info("Profile picture %s is stored client-side only, rendering without it", reference)
        return ResolvedPicture(source)
    return ResolvedPicture(PictureSource.NONE)
