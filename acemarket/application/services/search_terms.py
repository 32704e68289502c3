"""Smart search — split a feed query into location, property-type and free-text terms."""

from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple

from acemarket.domain.search_vocabulary import (
    DEFAULT_VOCABULARY,
    SearchVocabulary,
    strip_punctuation,
)


@dataclass(frozen=True)
class LocationTerm:
    """A place recognised in the query; ``aliases`` are its normalized spellings."""
    name: str
    aliases: FrozenSet[str]


@dataclass(frozen=True)
class SearchTerms:
    locations: Tuple[LocationTerm, ...] = ()
    property_types: Tuple[str, ...] = ()
    free_text: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.locations or self.property_types or self.free_text)


class _Classifier:
    def __init__(self, vocabulary: SearchVocabulary):
        self.vocabulary = vocabulary
        self.state_codes = vocabulary.state_codes
        self.state_names = vocabulary.state_names
        self.cities = vocabulary.city_names
        self.longest_place = vocabulary.longest_place

    def place(self, phrase: str) -> Optional[LocationTerm]:
        """Look a normalized phrase up as a state name, then as a city."""
        if phrase in self.state_names:
            return LocationTerm(phrase, frozenset({phrase, self.state_names[phrase]}))
        if phrase in self.cities:
            return LocationTerm(phrase, frozenset({phrase}))
        return None

    def state_code(self, token: str) -> Optional[LocationTerm]:
        bare = strip_punctuation(token)
        code = bare.lower()
        if code not in self.state_codes:
            return None
        if code in self.vocabulary.ambiguous_state_codes and not bare.isupper():
            return None
        name = self.state_codes[code]
        return LocationTerm(name, frozenset({name, code}))

    def classify(self, query: str) -> SearchTerms:
        tokens = query.split()
        locations: List[LocationTerm] = []
        property_types: List[str] = []
        free_text: List[str] = []

        i = 0
        while i < len(tokens):
            # Multi-word places first ("new york", "st. louis"), longest span wins
            span_term = None
            for span in range(min(self.longest_place, len(tokens) - i), 1, -1):
                phrase = self.vocabulary.normalize_place(" ".join(tokens[i:i + span]))
                term = self.place(phrase)
                if term:
                    span_term = (span, term)
                    break
            if span_term:
                locations.append(span_term[1])
                i += span_term[0]
                continue

            token = tokens[i]
            i += 1
            keyword = strip_punctuation(token).lower()
            if not keyword:
                continue

            if keyword in self.vocabulary.property_types:
                property_types.append(self.vocabulary.property_types[keyword])
                continue

            term = self.state_code(token) or self.place(self.vocabulary.normalize_place(token))
            if term:
                locations.append(term)
                continue

            text = token.lower().strip(".,")
            if text:
                free_text.append(text)

        return SearchTerms(
            locations=tuple(dict.fromkeys(locations)),
            property_types=tuple(dict.fromkeys(property_types)),
            free_text=tuple(dict.fromkeys(free_text)),
        )


def classify_query(query: str, vocabulary: SearchVocabulary = DEFAULT_VOCABULARY) -> SearchTerms:
    """Classify each whitespace token of ``query``.

    Tokens naming a property type (``warehouse``, ``office``) become property-type
    terms, tokens naming a US state or gazetteer city become location terms, and
    everything else is free text. Periods and commas are ignored and
    ``st``/``mt``/``ft`` read as ``saint``/``mount``/``fort`` when matching places.
    """
    return _Classifier(vocabulary).classify(query)
