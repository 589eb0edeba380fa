from .auth import router as auth_router
from .profile import router as profile_router
from .resumes import router as resumes_router
from .export import router as export_router

__all__ = [
    "auth_router", "profile_router", "resumes_router", "export_router"
]
