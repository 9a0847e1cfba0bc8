"""Static lookup tables for label-text interpretation."""

from __future__ import annotations

# Common grocery items recognized by name (lowercase)
GROCERY_ITEMS: tuple[str, ...] = (
    "milk", "bread", "eggs", "cheese", "butter", "yogurt",
    "chicken", "beef", "pork", "fish", "salmon", "turkey",
    "apples", "bananas", "oranges", "grapes", "strawberries",
    "lettuce", "tomatoes", "carrots", "onions", "potatoes",
    "rice", "pasta", "cereal", "juice", "water",
)

# Phrases that mark a nearby date as an expiry date (matched as substrings)
EXPIRY_KEYWORDS: tuple[str, ...] = (
    "exp", "expires", "expiry", "expiration",
    "best by", "best before", "use by", "use before",
    "sell by", "fresh until", "good until",
)

MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Explicit formats tried in order before the generic fallback parse.
# %m and %d accept both one- and two-digit values.
DATE_FORMATS: tuple[str, ...] = (
    "%m/%d/%Y",
    "%m/%d/%y",
    "%m-%d-%Y",
    "%m-%d-%y",
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%b %d %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%B %d, %Y",
    "%d %b %Y",
    "%d %B %Y",
)
