from rollcall.presentation.api.routers.accounts import router as accounts_router
from rollcall.presentation.api.routers.auth import router as auth_router
from rollcall.presentation.api.routers.hods import router as hods_router

__all__ = [
    "accounts_router",
    "auth_router",
    "hods_router",
]
