"""Chromosome representation shared by every GA encoding."""

from .gene import Gene
from .chromosome_base import ChromosomeBase, MIN_LENGTH
from .extensions import any_has_repeated_gene, validate_genes

__all__ = [
    "Gene",
    "ChromosomeBase",
    "MIN_LENGTH",
    "any_has_repeated_gene",
    "validate_genes"
]
