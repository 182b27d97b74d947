"""
Post service.

Orchestrates validation, sanitization, persistence and response shaping for
the post resource, and implements the existence and ownership checks that
guard the single-post routes.
"""

from collections.abc import Awaitable
from dataclasses import dataclass
from logging import getLogger
from math import ceil
from uuid import UUID

from blog_api.configs import MAX_PAGE, PAGE_SIZE, file_logger
from blog_api.context import RequestContext
from blog_api.errors.database import DatabaseError
from blog_api.errors.posts import (
    BadRequestError,
    ForbiddenError,
    InternalError,
    NotFoundError,
)
from blog_api.models.post import PostDB
from blog_api.repositories import PostStore, parse_post_id
from blog_api.schemas.post import PostCreate, PostListQuery, PostResponse, PostUpdate
from blog_api.services.sanitizer import HtmlSanitizer, Sanitizer, shorten
from blog_api.services.validator import SchemaValidator, Validator

logger = file_logger(getLogger(__name__))


@dataclass(frozen=True)
class PostPage:
    """One page of post excerpts plus the pagination totals."""

    items: list[PostResponse]
    total: int
    last_page: int


class PostService:
    """
    Business logic for the post resource.

    Parameters
    ----------
    store : PostStore
        Persistence backend.
    sanitizer : Sanitizer | None
        HTML sanitizer, defaults to the allow-list ``HtmlSanitizer``.
    create_validator : Validator[PostCreate] | None
        Validator for create payloads.
    update_validator : Validator[PostUpdate] | None
        Validator for partial update payloads.
    page_size : int
        Posts per list page.
    """

    def __init__(
        self,
        store: PostStore,
        sanitizer: Sanitizer | None = None,
        create_validator: Validator[PostCreate] | None = None,
        update_validator: Validator[PostUpdate] | None = None,
        page_size: int = PAGE_SIZE,
    ) -> None:
        self.store = store
        self.sanitizer = sanitizer or HtmlSanitizer()
        self.create_validator = create_validator or SchemaValidator(PostCreate)
        self.update_validator = update_validator or SchemaValidator(PostUpdate)
        self.page_size = page_size

    async def _guard[T](self, action: str, pending: Awaitable[T]) -> T:
        """Await a store call, turning backend failures into ``InternalError``."""
        try:
            return await pending
        except DatabaseError as e:
            logger.exception(f"Failed to {action}")
            raise InternalError from e

    async def load_post(self, raw_id: str, context: RequestContext) -> PostDB:
        """
        Existence check: resolve the post named in the path.

        Args:
            raw_id: Identifier as received in the URL.
            context: Request context receiving the loaded post.

        Returns:
            PostDB: The loaded post.

        Raises:
            BadRequestError: If ``raw_id`` is not a well-formed id. The store
                is not queried.
            NotFoundError: If no post has this id.
            InternalError: If the lookup fails.
        """
        post_id = parse_post_id(raw_id)
        if post_id is None:
            raise BadRequestError(detail="Invalid post id")

        post = await self._guard("load post", self.store.get_by_id(post_id))
        if post is None:
            raise NotFoundError(detail=f"Post with ID {post_id} not found")

        context.post = post
        return post

    def check_own_post(self, context: RequestContext) -> None:
        """
        Ownership check: the caller must be the post's author.

        Raises:
            NotFoundError: If no post was loaded into the context.
            ForbiddenError: If the caller is not the author.
        """
        if context.post is None:
            raise NotFoundError
        if context.user is None or context.post.author_id != context.user.id:
            raise ForbiddenError

    async def create(self, payload: object, context: RequestContext) -> PostDB:
        """
        Validate, sanitize and store a new post owned by the caller.

        Raises:
            BadRequestError: If the payload is invalid.
            ForbiddenError: If no caller is attached to the context.
            InternalError: If the insert fails.
        """
        data = self.create_validator.validate(payload)
        user = context.user
        if user is None:
            raise ForbiddenError(detail="Authentication required")

        post = PostDB(
            title=data.title,
            body=self.sanitizer.clean(data.body),
            tags=list(data.tags),
            author_id=user.id,
            author_username=user.username,
        )
        stored = await self._guard("create post", self.store.create(post))
        logger.info(f"Post {stored.id} created by {user.username}")
        return stored

    def to_excerpt(self, post: PostDB) -> PostResponse:
        """Render a post with its body reduced to a plain-text excerpt."""
        response = PostResponse.from_db(post)
        return response.model_copy(update={"body": shorten(self.sanitizer.to_text(post.body))})

    async def list_posts(self, query: PostListQuery) -> PostPage:
        """
        Fetch one page of posts, newest first, as excerpts.

        The tag and username filters restrict both the page and the total
        used for ``last_page``.

        Raises:
            BadRequestError: If ``query.page`` is below 1 or above ``MAX_PAGE``.
            InternalError: If a store call fails.
        """
        if query.page < 1:
            raise BadRequestError(detail="Page must be a positive integer")
        if query.page > MAX_PAGE:
            raise BadRequestError(detail=f"Page must not exceed {MAX_PAGE}")

        posts = await self._guard(
            "list posts",
            self.store.get_page(
                skip=(query.page - 1) * self.page_size,
                limit=self.page_size,
                tag=query.tag,
                username=query.username,
            ),
        )
        total = await self._guard(
            "count posts",
            self.store.count(tag=query.tag, username=query.username),
        )

        return PostPage(
            items=[self.to_excerpt(post) for post in posts],
            total=total,
            last_page=ceil(total / self.page_size),
        )

    def read(self, context: RequestContext) -> PostDB:
        """Return the post loaded by the existence check."""
        if context.post is None:
            raise NotFoundError
        return context.post

    async def remove(self, post_id: UUID) -> None:
        """
        Delete a post by id.

        Deleting an id that matches nothing is not an error.

        Raises:
            InternalError: If the delete fails.
        """
        deleted = await self._guard("delete post", self.store.delete(post_id))
        if deleted:
            logger.info(f"Post {post_id} deleted")
        else:
            logger.info(f"Delete of post {post_id} matched nothing")

    async def update(self, post_id: UUID, payload: object) -> PostDB:
        """
        Apply a partial update, re-sanitizing the body when supplied.

        Raises:
            BadRequestError: If the payload is invalid.
            NotFoundError: If no post has this id.
            InternalError: If the update fails.
        """
        data = self.update_validator.validate(payload)
        changes = data.model_dump(exclude_unset=True)
        if "body" in changes:
            changes["body"] = self.sanitizer.clean(changes["body"])

        post = await self._guard("update post", self.store.update(post_id, changes))
        if post is None:
            raise NotFoundError(detail=f"Post with ID {post_id} not found")

        logger.info(f"Post {post_id} updated fields: {sorted(changes)}")
        return post
