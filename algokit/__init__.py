"""Classic algorithms on sequences, numbers, matrices, heaps, graphs and trees."""

__version__ = "0.1.0"

__all__ = ["graphs", "heaps", "matrix", "numeric", "sequences", "sorting", "trees"]