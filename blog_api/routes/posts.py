# blog_api/routes/posts.py

"""
Post Routes.

CRUD endpoints for blog posts.

Summary
-------
Endpoints include:
  - Create post
  - List posts (paginated excerpts, optional tag/username filters)
  - Read post
  - Delete post
  - Update post

Dependencies
------------
  - `AuthContextDep`: request context with the authenticated caller.
  - `PostContextDep`: request context after the existence check.
  - `OwnPostContextDep`: request context after the existence and ownership checks.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Query, Response
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_204_NO_CONTENT

from blog_api.dependencies import (
    AuthContextDep,
    OwnPostContextDep,
    PostContextDep,
    PostServiceDep,
)
from blog_api.schemas import PostListQuery, PostResponse

router = APIRouter(prefix="/posts", tags=["📝 Posts"])


LAST_PAGE_HEADER = "Last-Page"

_POST_EXAMPLE = {
    "_id": "550e8400-e29b-41d4-a716-446655440000",
    "title": "Hello world",
    "body": "<p>First <b>post</b></p>",
    "tags": ["intro", "news"],
    "user": {"_id": "123e4567-e89b-12d3-a456-426614174000", "username": "velopert"},
    "publishedDate": "2025-01-01T09:30:00+00:00",
}

_BAD_REQUEST = {
    "description": "Bad request",
    "content": {
        "application/json": {
            "example": {
                "detail": "Validation failed",
                "errors": [{"field": "title", "message": "Field required", "type": "missing"}],
            },
        },
    },
}
_FORBIDDEN = {
    "description": "Forbidden",
    "content": {
        "application/json": {"example": {"detail": "You can only modify your own posts"}},
    },
}
_NOT_FOUND = {
    "description": "Not found",
    "content": {"application/json": {"example": {"detail": "Post with ID <uuid> not found"}}},
}


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=PostResponse,
    summary="Create a new post",
    description="Create a post owned by the authenticated caller. The body is sanitized.",
    responses={
        200: {"content": {"application/json": {"example": _POST_EXAMPLE}}},
        400: _BAD_REQUEST,
    },
    operation_id="posts_create",
)
async def create_post(
    payload: Annotated[
        dict[str, Any],
        Body(
            examples=[
                {
                    "title": "Hello world",
                    "body": "<p>First <b>post</b></p>",
                    "tags": ["intro", "news"],
                },
            ],
        ),
    ],
    context: AuthContextDep,
    service: PostServiceDep,
) -> PostResponse:
    """
    Create a new post.

    Parameters
    ----------
    payload : dict[str, Any]
        Raw JSON object with `title`, `body` and `tags`.
    context : RequestContext
        Request context carrying the caller.
    service : PostService
        Post service dependency.

    Returns
    -------
    PostResponse
        The stored post.
    """
    post = await service.create(payload, context)
    return PostResponse.from_db(post)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[PostResponse],
    summary="List posts",
    description=(
        "List posts newest first, ten per page, with bodies reduced to plain-text "
        "excerpts. The `Last-Page` header carries the number of pages."
    ),
    responses={
        200: {
            "headers": {LAST_PAGE_HEADER: {"description": "Total number of pages"}},
            "content": {"application/json": {"example": [_POST_EXAMPLE]}},
        },
        400: _BAD_REQUEST,
    },
    operation_id="posts_list",
)
async def list_posts(
    response: Response,
    service: PostServiceDep,
    page: Annotated[int, Query(description="1-based page number")] = 1,
    tag: Annotated[str | None, Query(description="Only posts with this tag")] = None,
    username: Annotated[str | None, Query(description="Only posts by this author")] = None,
) -> list[PostResponse]:
    """
    List posts.

    Parameters
    ----------
    response : Response
        Response used to set the `Last-Page` header.
    service : PostService
        Post service dependency.
    page : int
        Page number, starting at 1.
    tag : str | None
        Optional tag filter.
    username : str | None
        Optional author filter.

    Returns
    -------
    list[PostResponse]
        Post excerpts on the requested page.
    """
    result = await service.list_posts(PostListQuery(page=page, tag=tag, username=username))
    response.headers[LAST_PAGE_HEADER] = str(result.last_page)
    return result.items


@router.get(
    "/{post_id}",
    response_class=ORJSONResponse,
    response_model=PostResponse,
    summary="Get post by ID",
    responses={
        200: {"content": {"application/json": {"example": _POST_EXAMPLE}}},
        400: _BAD_REQUEST,
        404: _NOT_FOUND,
    },
    operation_id="posts_read",
)
async def read_post(context: PostContextDep, service: PostServiceDep) -> PostResponse:
    """Return the post loaded by the existence check."""
    return PostResponse.from_db(service.read(context))


@router.delete(
    "/{post_id}",
    response_class=Response,
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete post",
    responses={
        204: {"description": "No Content"},
        400: _BAD_REQUEST,
        403: _FORBIDDEN,
        404: _NOT_FOUND,
    },
    operation_id="posts_delete",
)
async def delete_post(context: OwnPostContextDep, service: PostServiceDep) -> Response:
    """
    Delete a post owned by the caller.

    Parameters
    ----------
    context : RequestContext
        Request context after the ownership check.
    service : PostService
        Post service dependency.

    Returns
    -------
    Response
        Empty `204 No Content` response.
    """
    post = service.read(context)
    await service.remove(post.id)
    return Response(status_code=HTTP_204_NO_CONTENT)


@router.patch(
    "/{post_id}",
    response_class=ORJSONResponse,
    response_model=PostResponse,
    summary="Update post",
    description="Partially update a post owned by the caller. Only supplied fields change.",
    responses={
        200: {"content": {"application/json": {"example": _POST_EXAMPLE}}},
        400: _BAD_REQUEST,
        403: _FORBIDDEN,
        404: _NOT_FOUND,
    },
    operation_id="posts_update",
)
async def update_post(
    payload: Annotated[
        dict[str, Any],
        Body(examples=[{"tags": ["updated"]}]),
    ],
    context: OwnPostContextDep,
    service: PostServiceDep,
) -> PostResponse:
    """
    Update a post.

    Parameters
    ----------
    payload : dict[str, Any]
        Raw JSON object with any of `title`, `body` and `tags`.
    context : RequestContext
        Request context after the ownership check.
    service : PostService
        Post service dependency.

    Returns
    -------
    PostResponse
        The updated post.
    """
    post = await service.update(service.read(context).id, payload)
    return PostResponse.from_db(post)
