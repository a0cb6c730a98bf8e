from bloglist.schemas.blog import (
    BlogCreate,
    BlogDetailResponse,
    BlogResponse,
    BlogUpdate,
)
from bloglist.schemas.common import BlogSummary, UserSummary
from bloglist.schemas.health import HealthCheckResponse
from bloglist.schemas.user import UserCreate, UserDetailResponse, UserResponse

__all__ = [
    "BlogCreate",
    "BlogDetailResponse",
    "BlogResponse",
    "BlogSummary",
    "BlogUpdate",
    "HealthCheckResponse",
    "UserCreate",
    "UserDetailResponse",
    "UserResponse",
    "UserSummary",
]
