from rapidfuzz.distance import Levenshtein


def levenshtein_distance(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions and substitutions
    turning `a` into `b` (unit weights, no transpositions).
    Case-sensitive: callers lower-case first.
    """
    return Levenshtein.distance(a, b)
