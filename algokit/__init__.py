"""Classic algorithms: bits, searching, trees, convex hulls, backtracking and dynamic programming."""

__version__ = "0.1.0"

__all__ = [
    "backtracking",
    "binary_search",
    "binary_tree",
    "bits",
    "bst",
    "dp",
    "hull_merge",
    "hulls",
]