"""Post service — creation, partial updates, ownership and listing of posts."""

from typing import List

import structlog

from acemarket.core.exceptions import (
    EntityNotFoundException,
    ForbiddenException,
    InvalidInputException,
)
from acemarket.domain.models.post import Post
from acemarket.domain.models.user import User
from acemarket.domain.post_rules import (
    PostRuleViolation,
    apply_price,
    check_image,
    check_price,
    check_status,
    normalize_tags,
    resolve_status,
)
from acemarket.domain.repositories.post_repository import PostRepository
from acemarket.domain.schemas.post import PostCreate, PostFilter, PostUpdate
from acemarket.infrastructure.image_storage import ImageStorage

logger = structlog.get_logger(__name__)


def _invalid(violation: PostRuleViolation) -> InvalidInputException:
    return InvalidInputException(str(violation), details={"field": violation.field})


def list_posts(repo: PostRepository, filters: PostFilter) -> List[Post]:
    return repo.get_with_filters(filters)


def get_post(repo: PostRepository, post_id: str) -> Post:
    if not post_id or not post_id.strip():
        raise InvalidInputException("Post ID is required")
    post = repo.get_by_id(post_id)
    if not post:
        raise EntityNotFoundException("Post not found")
    return post


def create_post(repo: PostRepository, storage: ImageStorage, owner: User, body: PostCreate) -> Post:
    """Persist a new post owned by ``owner``.

    The body arrives validated; the status rule is re-checked here so the
    stored status always belongs to the post type's vocabulary. An image is
    only kept on HAVE posts, and a failed upload aborts the creation.
    """
    try:
        status = resolve_status(body.type, body.status)
    except PostRuleViolation as e:
        raise _invalid(e) from e

    image_url = None
    if body.type == "HAVE" and body.image:
        image_url = storage.upload(body.image)

    post = repo.create({
        "type": body.type,
        "status": status,
        "content": body.content,
        "user_id": owner.id,
        "image_url": image_url,
        "property_details": (
            body.property_details.model_dump(by_alias=True, exclude_none=True)
            if body.property_details
            else None
        ),
        "tags": body.tags,
    })
    logger.info("Post created", post_id=post.id, type=post.type, user_id=owner.id)
    return post


def _collect_changes(post: Post, body: PostUpdate) -> dict:
    """Validate every supplied field against the stored post; nothing is applied yet."""
    supplied = body.model_fields_set
    changes: dict = {}

    try:
        if "status" in supplied and body.status:
            changes["status"] = check_status(post.type, body.status)

        if "price" in supplied:
            price = check_price(body.price)
            changes["property_details"] = apply_price(post.property_details, price)

        if "tags" in supplied:
            changes["tags"] = normalize_tags(body.tags)

        if post.type == "HAVE" and "image" in supplied:
            changes["image"] = check_image(body.image)
    except PostRuleViolation as e:
        raise _invalid(e) from e

    return changes


def update_post(
    repo: PostRepository,
    storage: ImageStorage,
    caller: User,
    post_id: str,
    body: PostUpdate,
) -> Post:
    """Apply a partial update from the post's owner.

    Only ``status``, ``price``, ``tags`` and ``image`` can change. ``image``
    is three-way on HAVE posts: absent keeps the image, a payload replaces it,
    an empty string or null removes it.
    """
    post = get_post(repo, post_id)

    if post.user_id != caller.id:
        logger.warning("Post update refused", post_id=post.id, caller_id=caller.id)
        raise ForbiddenException("Not authorized to update this post")

    changes = _collect_changes(post, body)

    if "image" in changes:
        image = changes.pop("image")
        changes["image_url"] = storage.upload(image) if image else None

    if changes:
        post = repo.update(post, changes)
        logger.info("Post updated", post_id=post.id, fields=sorted(changes))
    return post
