"""Classic algorithms and data structures: searching, ordering, graphs, trees,
recursion, subsequences, combinatorics and a random-number command."""

__version__ = "0.1.0"