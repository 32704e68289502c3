"""
Keyword tables behind the feed's smart search.

The city list is a gazetteer of common US markets, not an exhaustive one;
``SearchVocabulary`` can be rebuilt with other tables or extra cities.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Mapping

US_STATES: Dict[str, str] = {
    "AL": "Alabama", "AK": "Alaska", "AZ": "Arizona", "AR": "Arkansas",
    "CA": "California", "CO": "Colorado", "CT": "Connecticut", "DE": "Delaware",
    "DC": "District of Columbia", "FL": "Florida", "GA": "Georgia", "HI": "Hawaii",
    "ID": "Idaho", "IL": "Illinois", "IN": "Indiana", "IA": "Iowa",
    "KS": "Kansas", "KY": "Kentucky", "LA": "Louisiana", "ME": "Maine",
    "MD": "Maryland", "MA": "Massachusetts", "MI": "Michigan", "MN": "Minnesota",
    "MS": "Mississippi", "MO": "Missouri", "MT": "Montana", "NE": "Nebraska",
    "NV": "Nevada", "NH": "New Hampshire", "NJ": "New Jersey", "NM": "New Mexico",
    "NY": "New York", "NC": "North Carolina", "ND": "North Dakota", "OH": "Ohio",
    "OK": "Oklahoma", "OR": "Oregon", "PA": "Pennsylvania", "RI": "Rhode Island",
    "SC": "South Carolina", "SD": "South Dakota", "TN": "Tennessee", "TX": "Texas",
    "UT": "Utah", "VT": "Vermont", "VA": "Virginia", "WA": "Washington",
    "WV": "West Virginia", "WI": "Wisconsin", "WY": "Wyoming",
}

# Abbreviations that are also everyday words only count when typed in capitals
AMBIGUOUS_STATE_CODES: FrozenSet[str] = frozenset(
    {"al", "co", "de", "hi", "id", "in", "la", "me", "ok", "or", "pa", "oh", "ma", "mo", "ne"}
)

US_CITIES = (
    "Albuquerque", "Anaheim", "Anchorage", "Arlington", "Atlanta", "Aurora",
    "Austin", "Bakersfield", "Baltimore", "Baton Rouge", "Birmingham", "Boise",
    "Boston", "Buffalo", "Charleston", "Charlotte", "Chandler", "Chicago",
    "Cincinnati", "Cleveland", "Colorado Springs", "Columbus", "Corpus Christi",
    "Dallas", "Denver", "Des Moines", "Detroit", "Durham", "El Paso",
    "Fort Lauderdale", "Fort Myers", "Fort Wayne", "Fort Worth", "Fresno",
    "Glendale", "Greensboro", "Henderson", "Honolulu", "Houston", "Indianapolis",
    "Irvine", "Jacksonville", "Jersey City", "Kansas City", "Knoxville",
    "Las Vegas", "Lexington", "Lincoln", "Little Rock", "Long Beach",
    "Los Angeles", "Louisville", "Madison", "Memphis", "Mesa", "Miami",
    "Milwaukee", "Minneapolis", "Mount Pleasant", "Mount Vernon", "Nashville",
    "New Orleans", "New York", "Newark", "Norfolk", "Oakland", "Oklahoma City",
    "Omaha", "Orlando", "Philadelphia", "Phoenix", "Pittsburgh", "Plano",
    "Portland", "Providence", "Raleigh", "Reno", "Richmond", "Riverside",
    "Rochester", "Sacramento", "Saint Louis", "Saint Paul", "Saint Petersburg",
    "Salt Lake City", "San Antonio", "San Diego", "San Francisco", "San Jose",
    "Santa Ana", "Savannah", "Scottsdale", "Seattle", "Spokane", "Stockton",
    "Tacoma", "Tampa", "Tucson", "Tulsa", "Virginia Beach", "Washington",
    "Wichita",
)

PROPERTY_TYPE_KEYWORDS: Dict[str, str] = {
    "office": "Office",
    "offices": "Office",
    "retail": "Retail",
    "storefront": "Retail",
    "industrial": "Industrial",
    "warehouse": "Industrial",
    "land": "Land",
    "lot": "Land",
    "acreage": "Land",
    "multifamily": "Multifamily",
    "multi-family": "Multifamily",
    "apartment": "Multifamily",
    "apartments": "Multifamily",
}

PLACE_ABBREVIATIONS: Dict[str, str] = {"st": "saint", "mt": "mount", "ft": "fort"}

_STRIP = re.compile(r"[.,]")


def strip_punctuation(text: str) -> str:
    return _STRIP.sub("", text)


@dataclass(frozen=True)
class SearchVocabulary:
    """Lookup tables used to classify search tokens."""

    states: Mapping[str, str] = field(default_factory=lambda: dict(US_STATES))
    cities: Iterable[str] = US_CITIES
    property_types: Mapping[str, str] = field(default_factory=lambda: dict(PROPERTY_TYPE_KEYWORDS))
    abbreviations: Mapping[str, str] = field(default_factory=lambda: dict(PLACE_ABBREVIATIONS))
    ambiguous_state_codes: FrozenSet[str] = AMBIGUOUS_STATE_CODES

    def normalize_place(self, text: str) -> str:
        """Lowercase, drop periods/commas and expand st/mt/ft word by word."""
        words = strip_punctuation(text.lower()).split()
        return " ".join(self.abbreviations.get(word, word) for word in words)

    @property
    def state_codes(self) -> Dict[str, str]:
        """Lowercase code -> normalized state name."""
        return {code.lower(): self.normalize_place(name) for code, name in self.states.items()}

    @property
    def state_names(self) -> Dict[str, str]:
        """Normalized state name -> lowercase code."""
        return {self.normalize_place(name): code.lower() for code, name in self.states.items()}

    @property
    def city_names(self) -> FrozenSet[str]:
        return frozenset(self.normalize_place(city) for city in self.cities)

    @property
    def longest_place(self) -> int:
        names = list(self.state_names) + list(self.city_names)
        return max((len(name.split()) for name in names), default=1)

    def with_cities(self, extra: Iterable[str]) -> "SearchVocabulary":
        extra = [city for city in extra if city and city.strip()]
        if not extra:
            return self
        return SearchVocabulary(
            states=self.states,
            cities=tuple(self.cities) + tuple(extra),
            property_types=self.property_types,
            abbreviations=self.abbreviations,
            ambiguous_state_codes=self.ambiguous_state_codes,
        )


DEFAULT_VOCABULARY = SearchVocabulary()
