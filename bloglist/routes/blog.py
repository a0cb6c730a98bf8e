"""
Blog Routes.

Provides the CRUD endpoints for blogs with standardized documentation
aligned to established route patterns.

Summary
-------
Endpoints include:
  - List blogs (creating user expanded)
  - Get blog by id (creating user expanded)
  - Create blog
  - Replace blog
  - Delete blog

Dependencies
------------
  - `BlogRepoDep`: Blog repository bound to the request session.
  - `UserRepoDep`: User repository bound to the same session, used to
    validate `userId` and record the new blog on its creator.

Identifiers
-----------
Path identifiers are taken as plain strings and parsed explicitly so that a
malformed id is answered with an empty 400 rather than a schema error.
"""

from logging import getLogger
from typing import Annotated

from fastapi import APIRouter, Body
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from bloglist.dependencies import BlogRepoDep, UserRepoDep
from bloglist.errors import (
    ContentMissingError,
    MalformedIdentifierError,
    RecordNotFoundError,
    UnknownUserError,
)
from bloglist.models import BlogDB, UserDB
from bloglist.schemas import (
    BlogCreate,
    BlogDetailResponse,
    BlogResponse,
    BlogUpdate,
    UserSummary,
)
from bloglist.utils.helpers import file_logger
from bloglist.utils.identifiers import parse_identifier

router = APIRouter(prefix="/api/blogs", tags=["📝 Blogs"])

logger = file_logger(getLogger(__name__))

BLOG_EXAMPLE = {
    "id": "550e8400-e29b-41d4-a716-446655440000",
    "title": "React patterns",
    "author": "Michael Chan",
    "url": "https://reactpatterns.com/",
    "likes": 7,
}

USER_SUMMARY_EXAMPLE = {
    "id": "123e4567-e89b-12d3-a456-426614174000",
    "username": "cat0",
    "name": "Chencho Perez",
}


def db_blog_to_response(db_blog: BlogDB) -> BlogResponse:
    """
    Convert a `BlogDB` instance to `BlogResponse`.

    Parameters
    ----------
    db_blog : BlogDB
        Database blog entity.

    Returns
    -------
    BlogResponse
        Blog with the creating user's raw id.
    """
    return BlogResponse(
        id=db_blog.id,
        title=db_blog.title,
        author=db_blog.author,
        url=db_blog.url,
        likes=db_blog.likes,
        user=db_blog.user_id,
    )


def db_blog_to_detail_response(db_blog: BlogDB, db_user: UserDB | None) -> BlogDetailResponse:
    """
    Convert a blog and its creating user to `BlogDetailResponse`.

    Parameters
    ----------
    db_blog : BlogDB
        Database blog entity.
    db_user : UserDB | None
        Creating user, or None when the blog has none.

    Returns
    -------
    BlogDetailResponse
        Blog with the user projected to id, username and name.
    """
    return BlogDetailResponse(
        id=db_blog.id,
        title=db_blog.title,
        author=db_blog.author,
        url=db_blog.url,
        likes=db_blog.likes,
        user=UserSummary.model_validate(db_user) if db_user else None,
    )


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogDetailResponse],
    summary="List blogs",
    description="Retrieve every blog with its creating user expanded.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": [{**BLOG_EXAMPLE, "user": USER_SUMMARY_EXAMPLE}],
                },
            },
        },
    },
    operation_id="blogs_list",
)
async def list_blogs(repo: BlogRepoDep) -> list[BlogDetailResponse]:
    """
    List all blogs.

    Parameters
    ----------
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    list[BlogDetailResponse]
        Blogs in creation order.
    """
    rows = await repo.get_all_with_users()
    return [db_blog_to_detail_response(blog, user) for blog, user in rows]


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogDetailResponse,
    summary="Get blog by ID",
    description="Retrieve a blog by its id with its creating user expanded.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {**BLOG_EXAMPLE, "user": USER_SUMMARY_EXAMPLE},
                },
            },
        },
        400: {"description": "Malformed id", "content": {}},
        404: {"description": "Not found", "content": {}},
    },
    operation_id="blogs_get_by_id",
)
async def get_blog(blog_id: str, repo: BlogRepoDep) -> BlogDetailResponse:
    """
    Get blog by ID.

    Parameters
    ----------
    blog_id : str
        Blog identifier as given in the path.
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    BlogDetailResponse
        Blog data.

    Raises
    ------
    MalformedIdentifierError
        If the id cannot be parsed.
    RecordNotFoundError
        If no blog has this id.
    """
    row = await repo.get_with_user(parse_identifier(blog_id))
    if row is None:
        raise RecordNotFoundError(detail=f"Blog with ID {blog_id} not found")
    blog, user = row
    return db_blog_to_detail_response(blog, user)


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new blog",
    description=(
        "Create a new blog. When `userId` is given the blog is recorded on "
        "that user in the same transaction."
    ),
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {**BLOG_EXAMPLE, "user": USER_SUMMARY_EXAMPLE["id"]},
                },
            },
        },
        400: {
            "description": "Bad request",
            "content": {"application/json": {"example": {"error": "content missing"}}},
        },
    },
    operation_id="blogs_create",
)
async def create_blog(
    blog: Annotated[
        BlogCreate,
        Body(
            examples={
                "basic": {
                    "summary": "Blog created by a user",
                    "value": {
                        "title": "React patterns",
                        "author": "Michael Chan",
                        "url": "https://reactpatterns.com/",
                        "likes": 7,
                        "userId": "123e4567-e89b-12d3-a456-426614174000",
                    },
                },
            },
        ),
    ],
    blogs: BlogRepoDep,
    users: UserRepoDep,
) -> BlogResponse:
    """
    Create a new blog.

    Parameters
    ----------
    blog : BlogCreate
        Blog input payload.
    blogs : BlogRepository
        Blog repository dependency.
    users : UserRepository
        User repository dependency sharing the blog repository's session.

    Returns
    -------
    BlogResponse
        Created blog data.

    Raises
    ------
    ContentMissingError
        If title or author is missing or empty.
    UnknownUserError
        If `userId` is unparsable or names no user.
    """
    if not blog.has_content:
        raise ContentMissingError

    user: UserDB | None = None
    if blog.user_id is not None:
        try:
            user_id = parse_identifier(blog.user_id)
        except MalformedIdentifierError as e:
            raise UnknownUserError from e
        user = await users.get_by_id(user_id)
        if user is None:
            raise UnknownUserError

    db_blog = await blogs.create(blog, user_id=user.id if user else None)
    if user is not None:
        await users.append_blog(user, db_blog.id)

    logger.info(f"Blog {db_blog.id} created")
    return db_blog_to_response(db_blog)


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Replace a blog",
    description=(
        "Replace title, author, url and likes of a blog. Omitted url becomes "
        "null and omitted likes become 0; the creating user is kept."
    ),
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {**BLOG_EXAMPLE, "user": USER_SUMMARY_EXAMPLE["id"]},
                },
            },
        },
        400: {
            "description": "Bad request (empty body when the id is malformed)",
            "content": {"application/json": {"example": {"error": "content missing"}}},
        },
        404: {"description": "Not found", "content": {}},
    },
    operation_id="blogs_update",
)
async def update_blog(blog_id: str, blog: BlogUpdate, repo: BlogRepoDep) -> BlogResponse:
    """
    Replace a blog's editable fields.

    Parameters
    ----------
    blog_id : str
        Blog identifier as given in the path.
    blog : BlogUpdate
        Replacement payload.
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    BlogResponse
        Updated blog data.

    Raises
    ------
    MalformedIdentifierError
        If the id cannot be parsed.
    ContentMissingError
        If title or author is missing or empty.
    RecordNotFoundError
        If no blog has this id.
    """
    record_id = parse_identifier(blog_id)
    if not blog.has_content:
        raise ContentMissingError

    db_blog = await repo.replace(record_id, blog)
    if db_blog is None:
        raise RecordNotFoundError(detail=f"Blog with ID {blog_id} not found")

    return db_blog_to_response(db_blog)


@router.delete(
    "/{blog_id}",
    status_code=HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a blog",
    description="Delete a blog by id. Succeeds whether or not the blog exists.",
    responses={
        204: {"description": "Deleted"},
        400: {"description": "Malformed id", "content": {}},
    },
    operation_id="blogs_delete",
)
async def delete_blog(blog_id: str, repo: BlogRepoDep) -> Response:
    """
    Delete blog by ID.

    Parameters
    ----------
    blog_id : str
        Blog identifier as given in the path.
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    Response
        Empty 204 response.
    """
    deleted = await repo.delete(parse_identifier(blog_id))
    if not deleted:
        logger.info(f"Delete of blog {blog_id} matched nothing")
    return Response(status_code=HTTP_204_NO_CONTENT)
