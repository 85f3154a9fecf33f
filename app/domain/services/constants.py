# Constants for catalog search and listing.
KEYWORD_DISTANCE_THRESHOLD = 3  # Max edit distance for a keyword to match a name or word
MIN_WORD_LENGTH = 4  # Shorter words of a product name are ignored by the word-level match

# Star values of a review, in chart order (highest first)
RATING_STARS = (5, 4, 3, 2, 1)

# Cache key namespaces
CACHE_PREFIX_SHOP = "shop"
CACHE_PREFIX_CATEGORIES = "categories"
