"""Classic algorithms: sorting, recursion, divide and conquer, dynamic programming, greedy methods, hashing and Huffman coding."""

__version__ = "0.1.0"