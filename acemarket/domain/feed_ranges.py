"""Price and size buckets offered by the feed filter.

Each bucket is a half-open range ``[low, high)``; ``None`` leaves a side open.
Sizes are in square feet.
"""

ALL = "ALL"

PRICE_RANGES = {
    "UNDER_100K": (None, 100_000),
    "100K_500K": (100_000, 500_000),
    "500K_1M": (500_000, 1_000_000),
    "1M_5M": (1_000_000, 5_000_000),
    "5M_10M": (5_000_000, 10_000_000),
    "OVER_10M": (10_000_000, None),
}

SIZE_RANGES = {
    "UNDER_1000": (None, 1_000),
    "1000_5000": (1_000, 5_000),
    "5000_10000": (5_000, 10_000),
    "10000_50000": (10_000, 50_000),
    "50000_100000": (50_000, 100_000),
    "OVER_100000": (100_000, None),
}


def in_range(value: float, bounds: tuple) -> bool:
    low, high = bounds
    if low is not None and value < low:
        return False
    if high is not None and value >= high:
        return False
    return True
