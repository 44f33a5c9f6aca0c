"""Tree data structures: general, binary, binary search, red-black and Huffman trees."""

__version__ = "0.1.0"

__all__ = [
    "binary_search_tree",
    "binary_tree",
    "huffman_tree",
    "red_black_check",
    "red_black_tree",
    "traversal_tree",
    "tree",
]