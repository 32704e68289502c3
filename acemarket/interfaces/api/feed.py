"""Feed API route — posts narrowed by type, price, size and smart search."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import ValidationError

from acemarket.application.services.feed_filter import filter_feed
from acemarket.application.services.post_service import list_posts
from acemarket.core.exceptions import InvalidInputException
from acemarket.domain.feed_ranges import ALL
from acemarket.domain.repositories.post_repository import PostRepository
from acemarket.domain.schemas.feed import FeedFilter
from acemarket.domain.schemas.post import PostFilter, PostRead
from acemarket.domain.search_vocabulary import SearchVocabulary
from acemarket.interfaces.deps import get_post_repository, get_search_vocabulary

router = APIRouter(prefix="/api/feed", tags=["Feed"])


@router.get("", response_model=List[PostRead])
def feed(
    post_type: str = Query(ALL, alias="type"),
    price: str = ALL,
    size: str = ALL,
    search: str = "",
    user_id: Optional[str] = Query(None, alias="userId"),
    repo: PostRepository = Depends(get_post_repository),
    vocabulary: SearchVocabulary = Depends(get_search_vocabulary),
):
    try:
        filters = FeedFilter(type=post_type, price=price, size=size, search=search, userId=user_id)
    except ValidationError as e:
        fields = [
            {"field": ".".join(str(part) for part in error["loc"]), "message": error["msg"]}
            for error in e.errors()
        ]
        raise InvalidInputException("Invalid feed filter", details={"fields": fields}) from e

    posts = [PostRead.model_validate(p) for p in list_posts(repo, PostFilter(user_id=filters.user_id))]
    return filter_feed(posts, filters, vocabulary)
