"""Tests for smart-search query classification."""

import pytest

from acemarket.application.services.search_terms import classify_query
from acemarket.domain.search_vocabulary import DEFAULT_VOCABULARY, SearchVocabulary


def _location_names(terms):
    return [term.name for term in terms.locations]


@pytest.mark.unit
def test_property_keyword_and_state_code():
    terms = classify_query("warehouse TX")

    assert terms.property_types == ("Industrial",)
    assert _location_names(terms) == ["texas"]
    assert terms.locations[0].aliases == frozenset({"texas", "tx"})
    assert terms.free_text == ()


@pytest.mark.unit
def test_multi_word_place_is_one_location():
    terms = classify_query("office new york")

    assert terms.property_types == ("Office",)
    assert _location_names(terms) == ["new york"]
    assert terms.free_text == ()


@pytest.mark.unit
def test_city_with_abbreviation_and_punctuation():
    terms = classify_query("St. Louis, retail")

    assert _location_names(terms) == ["saint louis"]
    assert terms.property_types == ("Retail",)


@pytest.mark.unit
def test_lowercase_ambiguous_code_is_free_text():
    terms = classify_query("space in downtown")

    assert terms.locations == ()
    assert terms.free_text == ("space", "in", "downtown")


@pytest.mark.unit
def test_uppercase_ambiguous_code_is_a_state():
    terms = classify_query("land IN")

    assert _location_names(terms) == ["indiana"]
    assert terms.property_types == ("Land",)


@pytest.mark.unit
def test_state_name_single_word():
    terms = classify_query("texas")

    assert _location_names(terms) == ["texas"]
    assert terms.locations[0].aliases == frozenset({"texas", "tx"})


@pytest.mark.unit
def test_duplicate_terms_collapse():
    terms = classify_query("warehouse industrial warehouse")

    assert terms.property_types == ("Industrial",)


@pytest.mark.unit
def test_free_text_strips_edge_punctuation():
    terms = classify_query("cold-storage, medical.")

    assert terms.free_text == ("cold-storage", "medical")


@pytest.mark.unit
def test_empty_query():
    assert classify_query("").is_empty
    assert classify_query("  , . ").is_empty


@pytest.mark.unit
def test_vocabulary_with_extra_cities():
    vocabulary = DEFAULT_VOCABULARY.with_cities(["Boca Raton", "  "])

    assert _location_names(classify_query("Boca Raton office", vocabulary)) == ["boca raton"]
    assert classify_query("Boca Raton office").free_text == ("boca", "raton")
    assert DEFAULT_VOCABULARY.with_cities([]) is DEFAULT_VOCABULARY


@pytest.mark.unit
def test_custom_vocabulary_tables():
    vocabulary = SearchVocabulary(states={"TX": "Texas"}, cities=("Austin",))

    terms = classify_query("Austin CA", vocabulary)

    assert _location_names(terms) == ["austin"]
    assert terms.free_text == ("ca",)
