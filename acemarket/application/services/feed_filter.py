"""Feed filter — narrows an already fetched list of posts for display.

Every criterion is optional and they are ANDed: type, price bucket, size bucket
(square feet, acres converted) and the smart search.
"""

import re
from typing import Iterable, List, Optional

from acemarket.application.services.search_terms import LocationTerm, SearchTerms, classify_query
from acemarket.domain.feed_ranges import ALL, PRICE_RANGES, SIZE_RANGES, in_range
from acemarket.domain.post_rules import SQFT_PER_ACRE
from acemarket.domain.schemas.feed import FeedFilter
from acemarket.domain.schemas.post import PostRead, PropertyDetails
from acemarket.domain.search_vocabulary import DEFAULT_VOCABULARY, SearchVocabulary

MIN_SEARCH_LENGTH = 3

_WHITESPACE = re.compile(r"\s+")


def matches_type(post: PostRead, post_type: str) -> bool:
    return post_type == ALL or post.type == post_type


def matches_price(post: PostRead, price_range: str) -> bool:
    if price_range == ALL:
        return True
    price = post.property_details.price if post.property_details else None
    if price is None:
        return False
    return in_range(price, PRICE_RANGES[price_range])


def size_in_sqft(details: Optional[PropertyDetails]) -> Optional[float]:
    """Size in square feet, or None when the post carries no usable size."""
    if not details or not details.size or details.size <= 0:
        return None
    if details.size_unit == "acres":
        return details.size * SQFT_PER_ACRE
    return details.size


def matches_size(post: PostRead, size_range: str) -> bool:
    if size_range == ALL:
        return True
    size = size_in_sqft(post.property_details)
    if size is None:
        return False
    return in_range(size, SIZE_RANGES[size_range])


def _text_fields(post: PostRead) -> List[str]:
    """Fields searched by free-text terms, lowercased."""
    fields = [post.content, post.owner.username]
    fields.extend(_WHITESPACE.sub("", tag) for tag in post.tags or [])
    if post.property_details and post.property_details.industry:
        fields.extend(post.property_details.industry)
    return [field.lower() for field in fields if field]


def _location_fields(post: PostRead) -> List[str]:
    details = post.property_details
    if not details or not details.location:
        return []
    location = details.location
    return [value for value in (location.city, location.state, location.address) if value]


def _location_matches(term: LocationTerm, fields: Iterable[str]) -> bool:
    for field in fields:
        words = field.split()
        for alias in term.aliases:
            # Two-letter codes compare as whole words so "in" never hits "Indiana"
            if len(alias) <= 2:
                if alias in words:
                    return True
            elif alias in field:
                return True
    return False


def matches_terms(post: PostRead, terms: SearchTerms, vocabulary: SearchVocabulary) -> bool:
    """AND across term categories, OR within one."""
    if terms.locations:
        fields = [vocabulary.normalize_place(value) for value in _location_fields(post)]
        if not any(_location_matches(term, fields) for term in terms.locations):
            return False

    if terms.property_types:
        details = post.property_details
        property_type = (details.property_type or "").lower() if details else ""
        if property_type not in {wanted.lower() for wanted in terms.property_types}:
            return False

    if terms.free_text:
        fields = _text_fields(post)
        if not any(term in field for term in terms.free_text for field in fields):
            return False

    return True


def matches_raw_query(post: PostRead, query: str) -> bool:
    """Single substring match across every searchable field."""
    needle = query.lower()
    fields = _text_fields(post) + [value.lower() for value in _location_fields(post)]
    if post.property_details and post.property_details.property_type:
        fields.append(post.property_details.property_type.lower())
    return any(needle in field for field in fields)


def matches_search(
    post: PostRead,
    query: str,
    vocabulary: SearchVocabulary = DEFAULT_VOCABULARY,
    terms: Optional[SearchTerms] = None,
) -> bool:
    if len(query) < MIN_SEARCH_LENGTH:
        return True
    if terms is None:
        terms = classify_query(query, vocabulary)
    if terms.is_empty:
        return matches_raw_query(post, query)
    return matches_terms(post, terms, vocabulary)


def filter_feed(
    posts: Iterable[PostRead],
    filters: FeedFilter,
    vocabulary: SearchVocabulary = DEFAULT_VOCABULARY,
) -> List[PostRead]:
    """Apply every feed criterion; result is newest first."""
    terms = classify_query(filters.search, vocabulary) if filters.search else None
    selected = [
        post
        for post in posts
        if matches_type(post, filters.type)
        and matches_price(post, filters.price_range)
        and matches_size(post, filters.size_range)
        and matches_search(post, filters.search, vocabulary, terms)
    ]
    return sorted(selected, key=lambda post: post.created_at, reverse=True)
