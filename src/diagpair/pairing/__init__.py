from .diagonals import combine, combine_with, diagonal_count, diagonals

__all__ = ["combine", "combine_with", "diagonal_count", "diagonals"]
