"""Classic algorithms and data structures: trees, lists, primes and Huffman coding."""

__version__ = "0.1.0"
__all__ = ["basics", "bst", "huffman", "linked_list", "primes"]