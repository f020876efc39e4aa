"""Classic array, search, matrix, sum, string, integer and subset algorithms."""

__version__ = "0.1.0"
__all__ = ["arrays", "search", "matrix", "sums", "strings", "integers", "combinatorics"]