"""Tests for the post status vocabulary, tag and price rules."""

import pytest

from acemarket.domain.post_rules import (
    DEFAULT_STATUS,
    MAX_TAGS,
    PostRuleViolation,
    allowed_statuses,
    apply_price,
    check_image,
    check_price,
    check_status,
    normalize_tags,
    resolve_status,
)


@pytest.mark.unit
def test_vocabularies_per_type():
    assert set(allowed_statuses("HAVE")) == {"active", "pending", "sold", "leased", "withdrawn"}
    assert set(allowed_statuses("NEED")) == {"active", "paused", "closed"}
    assert allowed_statuses("OTHER") == ()


@pytest.mark.unit
@pytest.mark.parametrize(
    "post_type,status",
    [("HAVE", "active"), ("HAVE", "sold"), ("HAVE", "withdrawn"), ("NEED", "paused"), ("NEED", "closed")],
)
def test_check_status_accepts_own_vocabulary(post_type, status):
    assert check_status(post_type, status) == status


@pytest.mark.unit
@pytest.mark.parametrize(
    "post_type,status",
    [("NEED", "sold"), ("NEED", "leased"), ("HAVE", "paused"), ("HAVE", "closed"), ("HAVE", "archived")],
)
def test_check_status_rejects_other_vocabulary(post_type, status):
    with pytest.raises(PostRuleViolation) as exc_info:
        check_status(post_type, status)

    assert exc_info.value.field == "status"
    assert str(exc_info.value) == "Invalid status for this post type"


@pytest.mark.unit
def test_resolve_status_defaults_when_missing():
    assert resolve_status("HAVE", None) == DEFAULT_STATUS == "active"
    assert resolve_status("NEED", "") == "active"
    assert resolve_status("NEED", "paused") == "paused"


@pytest.mark.unit
def test_normalize_tags_trims_entries():
    assert normalize_tags(["  downtown ", "urgent"]) == ["downtown", "urgent"]


@pytest.mark.unit
@pytest.mark.parametrize("tags", [["ok", ""], ["ok", "   "], ["ok", 3], [None]])
def test_normalize_tags_rejects_blank_or_non_string(tags):
    with pytest.raises(PostRuleViolation, match="All tags must be non-empty strings"):
        normalize_tags(tags)


@pytest.mark.unit
def test_normalize_tags_limit():
    assert len(normalize_tags([f"tag{i}" for i in range(MAX_TAGS)])) == MAX_TAGS

    with pytest.raises(PostRuleViolation, match="Maximum 10 tags allowed"):
        normalize_tags([f"tag{i}" for i in range(MAX_TAGS + 1)])


@pytest.mark.unit
@pytest.mark.parametrize("tags", ["downtown", None, {"a": 1}])
def test_normalize_tags_requires_a_list(tags):
    with pytest.raises(PostRuleViolation, match="Tags must be an array"):
        normalize_tags(tags)


@pytest.mark.unit
@pytest.mark.parametrize("price", [0, 250000, 99.5])
def test_check_price_accepts_non_negative_numbers(price):
    assert check_price(price) == price


@pytest.mark.unit
@pytest.mark.parametrize("price", [-1, "100", None, True, float("nan"), float("inf")])
def test_check_price_rejects_invalid(price):
    with pytest.raises(PostRuleViolation) as exc_info:
        check_price(price)
    assert exc_info.value.field == "price"


@pytest.mark.unit
def test_apply_price_requires_property_details():
    with pytest.raises(PostRuleViolation, match="no property details"):
        apply_price(None, 1000)


@pytest.mark.unit
def test_apply_price_replaces_only_price():
    details = {"propertyType": "Office", "price": 1000, "size": 2000}

    updated = apply_price(details, 1500)

    assert updated == {"propertyType": "Office", "price": 1500, "size": 2000}
    assert details["price"] == 1000


@pytest.mark.unit
def test_check_image_empty_means_remove():
    assert check_image(None) is None
    assert check_image("") is None
    assert check_image("data:image/png;base64,AAAA") == "data:image/png;base64,AAAA"


@pytest.mark.unit
@pytest.mark.parametrize("image", [5, ["data:image/png;base64,AAAA"], True])
def test_check_image_rejects_non_strings(image):
    with pytest.raises(PostRuleViolation) as exc_info:
        check_image(image)
    assert exc_info.value.field == "image"
