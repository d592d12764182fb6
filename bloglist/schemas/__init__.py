from bloglist.schemas.auth import LoginRequest, LoginResponse, TokenData
from bloglist.schemas.blog import (
    BlogCreate,
    BlogListResponse,
    BlogOwner,
    BlogResponse,
    BlogUpdate,
    NewBlog,
)
from bloglist.schemas.health import HealthCheckResponse
from bloglist.schemas.user import UserBlog, UserCreate, UserResponse

__all__ = [
    "BlogCreate",
    "BlogListResponse",
    "BlogOwner",
    "BlogResponse",
    "BlogUpdate",
    "HealthCheckResponse",
    "LoginRequest",
    "LoginResponse",
    "NewBlog",
    "TokenData",
    "UserBlog",
    "UserCreate",
    "UserResponse",
]
