from bloglist.dependencies.dependencies import (
    BlogRepoDep,
    SessionDep,
    UserRepoDep,
    get_blog_repository,
    get_user_repository,
)

__all__ = [
    "BlogRepoDep",
    "SessionDep",
    "UserRepoDep",
    "get_blog_repository",
    "get_user_repository",
]
