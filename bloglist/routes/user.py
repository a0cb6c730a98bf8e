"""
User Routes.

Provides registration and lookup endpoints for users.

Summary
-------
Endpoints include:
  - Create user
  - List users (blogs expanded)
  - Get user by id (blogs expanded)

Dependencies
------------
  - `UserRepoDep`: User repository bound to the request session.
  - `BlogRepoDep`: Blog repository used to expand the users' blog lists.

Passwords are hashed before storage and never echoed back; neither the
password nor its hash is part of any response model.
"""

from logging import getLogger
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Body
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from bloglist.dependencies import BlogRepoDep, UserRepoDep
from bloglist.errors import (
    DuplicateEntryError,
    DuplicateUsernameError,
    MalformedUserError,
    RecordNotFoundError,
)
from bloglist.models import BlogDB, UserDB
from bloglist.schemas import BlogSummary, UserCreate, UserDetailResponse, UserResponse
from bloglist.utils.helpers import file_logger
from bloglist.utils.identifiers import parse_identifier

router = APIRouter(prefix="/api/users", tags=["🆔 Users"])

logger = file_logger(getLogger(__name__))

USER_EXAMPLE = {
    "id": "123e4567-e89b-12d3-a456-426614174000",
    "username": "cat0",
    "name": "Chencho Perez",
}

BLOG_SUMMARY_EXAMPLE = {
    "id": "550e8400-e29b-41d4-a716-446655440000",
    "title": "React patterns",
    "author": "Michael Chan",
    "url": "https://reactpatterns.com/",
}


def _blog_refs(db_user: UserDB) -> list[UUID]:
    """Parse the stored blog references of a user, dropping unreadable ones."""
    refs = []
    for ref in db_user.blogs:
        try:
            refs.append(UUID(ref))
        except ValueError:
            logger.warning(f"User {db_user.id} holds an unreadable blog reference {ref!r}")
    return refs


def db_user_to_response(db_user: UserDB) -> UserResponse:
    """
    Convert a `UserDB` instance to `UserResponse`.

    Parameters
    ----------
    db_user : UserDB
        Database user entity.

    Returns
    -------
    UserResponse
        User with the raw ids of its blogs.
    """
    return UserResponse(
        id=db_user.id,
        username=db_user.username,
        name=db_user.name,
        blogs=_blog_refs(db_user),
    )


def db_user_to_detail_response(
    db_user: UserDB,
    blogs_by_id: dict[UUID, BlogDB],
) -> UserDetailResponse:
    """
    Convert a user to `UserDetailResponse`, expanding its blogs.

    Parameters
    ----------
    db_user : UserDB
        Database user entity.
    blogs_by_id : dict[UUID, BlogDB]
        Blogs available for expansion. References missing from it are
        skipped.

    Returns
    -------
    UserDetailResponse
        User with blogs projected to id, title, author and url.
    """
    return UserDetailResponse(
        id=db_user.id,
        username=db_user.username,
        name=db_user.name,
        blogs=[
            BlogSummary.model_validate(blogs_by_id[ref])
            for ref in _blog_refs(db_user)
            if ref in blogs_by_id
        ],
    )


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new user",
    description=(
        "Register a new user. Username and password must each be at least "
        "3 characters long and the username must be unused."
    ),
    responses={
        201: {
            "content": {"application/json": {"example": {**USER_EXAMPLE, "blogs": []}}},
        },
        400: {
            "description": "Bad request",
            "content": {
                "application/json": {
                    "examples": {
                        "malformed": {"value": {"error": "malformed user"}},
                        "duplicate": {"value": {"error": "duplicate username"}},
                    },
                },
            },
        },
    },
    operation_id="users_create",
)
async def create_user(
    user: Annotated[
        UserCreate,
        Body(
            examples={
                "basic": {
                    "summary": "New user",
                    "value": {
                        "username": "cat0",
                        "name": "Chencho Perez",
                        "password": "miauuuuu",
                    },
                },
            },
        ),
    ],
    repo: UserRepoDep,
) -> UserResponse:
    """
    Create a new user.

    Parameters
    ----------
    user : UserCreate
        User input payload.
    repo : UserRepository
        Repository dependency.

    Returns
    -------
    UserResponse
        Created user data.

    Raises
    ------
    MalformedUserError
        If the username or password is missing or too short.
    DuplicateUsernameError
        If the username is taken.
    """
    if not user.is_well_formed or user.username is None:
        raise MalformedUserError

    if await repo.get_by_username(user.username) is not None:
        raise DuplicateUsernameError

    try:
        db_user = await repo.create(user)
    except DuplicateEntryError as e:
        raise DuplicateUsernameError from e

    logger.info(f"User {db_user.id} created")
    return db_user_to_response(db_user)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[UserDetailResponse],
    summary="List users",
    description="Retrieve every user with its blogs expanded.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": [{**USER_EXAMPLE, "blogs": [BLOG_SUMMARY_EXAMPLE]}],
                },
            },
        },
    },
    operation_id="users_list",
)
async def list_users(users: UserRepoDep, blogs: BlogRepoDep) -> list[UserDetailResponse]:
    """
    List all users.

    Parameters
    ----------
    users : UserRepository
        User repository dependency.
    blogs : BlogRepository
        Blog repository dependency.

    Returns
    -------
    list[UserDetailResponse]
        Users in creation order.
    """
    db_users = await users.get_all()
    refs = {ref for db_user in db_users for ref in _blog_refs(db_user)}
    blogs_by_id = await blogs.get_by_ids(list(refs))
    return [db_user_to_detail_response(db_user, blogs_by_id) for db_user in db_users]


@router.get(
    "/{user_id}",
    response_class=ORJSONResponse,
    response_model=UserDetailResponse,
    summary="Get user by ID",
    description="Retrieve a user by its id with its blogs expanded.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {**USER_EXAMPLE, "blogs": [BLOG_SUMMARY_EXAMPLE]},
                },
            },
        },
        400: {"description": "Malformed id", "content": {}},
        404: {"description": "Not found", "content": {}},
    },
    operation_id="users_get_by_id",
)
async def get_user(user_id: str, users: UserRepoDep, blogs: BlogRepoDep) -> UserDetailResponse:
    """
    Get user by ID.

    Parameters
    ----------
    user_id : str
        User identifier as given in the path.
    users : UserRepository
        User repository dependency.
    blogs : BlogRepository
        Blog repository dependency.

    Returns
    -------
    UserDetailResponse
        User data.

    Raises
    ------
    MalformedIdentifierError
        If the id cannot be parsed.
    RecordNotFoundError
        If no user has this id.
    """
    db_user = await users.get_by_id(parse_identifier(user_id))
    if db_user is None:
        raise RecordNotFoundError(detail=f"User with ID {user_id} not found")

    blogs_by_id = await blogs.get_by_ids(_blog_refs(db_user))
    return db_user_to_detail_response(db_user, blogs_by_id)
