from bloglist.web.routers.auth import router as auth_router
from bloglist.web.routers.blogs import router as blogs_router
from bloglist.web.routers.users import router as users_router

__all__ = [
    "auth_router",
    "blogs_router",
    "users_router",
]
