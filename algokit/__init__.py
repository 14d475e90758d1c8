"""Classic algorithms on sequences, matrices, graphs and binary trees."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "backtracking",
    "binarytree",
    "graphs",
    "matrix",
    "searching",
    "setops",
    "sorting",
    "subarrays",
    "tree_properties",
]