"""
Helper checks over chromosome collections.

Used by populations and by permutation-style encodings to sanity check the
genes produced by a concrete generate_gene() implementation.
"""

from typing import Iterable, Optional

from chromosomes.chromosome_base import ChromosomeBase


def any_has_repeated_gene(chromosomes: Iterable[ChromosomeBase]) -> bool:
    """Check whether any chromosome holds the same gene value twice.

    Args:
        chromosomes: Chromosomes to inspect (gene values must be hashable)

    Returns:
        True if at least one chromosome has fewer distinct genes than its length

    Example:
        >>> chromosome.replace_genes(0, [Gene(1), Gene(1)])
        >>> any_has_repeated_gene([chromosome])
        True
    """
    for chromosome in chromosomes:
        if len(set(chromosome.get_genes())) < chromosome.length:
            return True

    return False


def validate_genes(chromosome: Optional[ChromosomeBase]) -> None:
    """Ensure every gene of `chromosome` holds a value.

    A None chromosome is accepted as-is.

    Raises:
        ValueError: If any gene is still the unset sentinel
    """
    if chromosome is None:
        return

    if any(gene.value is None for gene in chromosome.get_genes()):
        raise ValueError(
            f"The chromosome '{chromosome.__class__.__name__}' is generating genes with None value."
        )
