from capstone.presentation.api.routers.auth import router as auth_router
from capstone.presentation.api.routers.onboarding import router as onboarding_router
from capstone.presentation.api.routers.profile import router as profile_router
from capstone.presentation.api.routers.projects import router as projects_router

__all__ = [
    "auth_router",
    "onboarding_router",
    "profile_router",
    "projects_router",
]
