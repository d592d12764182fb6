from bloglist.routes.blog import router as blog_router
from bloglist.routes.login import router as login_router
from bloglist.routes.user import router as user_router

__all__ = ["blog_router", "login_router", "user_router"]
