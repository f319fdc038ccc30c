"""
Abstract Chromosome Base

Shared structure for every chromosome encoding used by the GA:
- Fixed-or-resizable ordered sequence of Gene slots (never fewer than 2)
- Fitness score assigned by an external evaluator, reset on structural edits
- Total ordering over individuals driven by fitness, with None-safe operators

Concrete encodings (binary, permutation, real-valued, ...) subclass
ChromosomeBase and implement two hooks:
- generate_gene(index): produce the encoding's value for one slot
- create_new(): produce a fresh chromosome of the same encoding

Fitness state machine:
    construction / replace_gene / replace_genes / resize -> unset (None)
    external assignment of chromosome.fitness             -> set
    generate_gene / create_gene / create_genes            -> unchanged
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from chromosomes.gene import Gene


MIN_LENGTH = 2
"""Minimum number of genes a chromosome may hold."""


class ChromosomeBase(ABC):
    """
    Abstract chromosome: ordered genes plus a cached fitness score.

    Ordering convention (higher fitness compares greater):
        >>> a.fitness, b.fitness = 1.0, 2.0
        >>> a < b, b > a, a == b
        (True, True, False)

    Equality and hashing look at fitness only, never at gene content. All
    unevaluated chromosomes hash to 0.

    The class holds no lock; callers must not mutate one instance from
    several threads at once.

    Example Implementation:
        >>> class IntChromosome(ChromosomeBase):
        ...     def __init__(self, length, rng):
        ...         super().__init__(length)
        ...         self.rng = rng
        ...         self.create_genes()
        ...
        ...     def generate_gene(self, index):
        ...         return Gene(int(self.rng.integers(0, 10)))
        ...
        ...     def create_new(self):
        ...         return IntChromosome(self.length, self.rng)
    """

    def __init__(self, length: int):
        """
        Allocate `length` unset gene slots with no fitness.

        Args:
            length: Number of genes (must be >= 2)

        Raises:
            ValueError: If length < 2
        """
        self._validate_length(length)
        self._length = length
        self._genes: List[Gene] = [Gene() for _ in range(length)]
        self._fitness: Optional[float] = None

    # ------------------------------------------------------------------
    # Encoding hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def generate_gene(self, index: int) -> Gene:
        """
        Generate the encoding-specific gene for slot `index`.

        Implementations must only build and return the Gene; storing it is
        done by create_gene(). Fitness is never affected.

        Args:
            index: Gene slot the value is generated for

        Returns:
            New Gene for that slot
        """
        raise NotImplementedError("Subclasses must implement generate_gene() method")

    @abstractmethod
    def create_new(self) -> 'ChromosomeBase':
        """
        Create a fresh chromosome of the same encoding.

        Used by clone() and by populations spawning individuals from an
        adam chromosome. The new instance must not share gene storage
        with this one.

        Returns:
            New chromosome instance
        """
        raise NotImplementedError("Subclasses must implement create_new() method")

    # ------------------------------------------------------------------
    # Fitness
    # ------------------------------------------------------------------

    @property
    def fitness(self) -> Optional[float]:
        """Fitness score, or None if not evaluated since the last structural edit."""
        return self._fitness

    @fitness.setter
    def fitness(self, value: Optional[float]) -> None:
        self._fitness = value

    def _invalidate_fitness(self) -> None:
        self._fitness = None

    # ------------------------------------------------------------------
    # Gene access
    # ------------------------------------------------------------------

    @property
    def length(self) -> int:
        """Current number of gene slots."""
        return self._length

    def get_gene(self, index: int) -> Gene:
        """Return the gene stored at `index`."""
        return self._genes[index]

    def get_genes(self) -> List[Gene]:
        """Return a snapshot list of all genes in slot order."""
        return list(self._genes)

    def create_gene(self, index: int) -> None:
        """Store generate_gene(index) into slot `index`, keeping fitness.

        Raises:
            IndexError: If index is out of range
        """
        self._validate_index(index)
        self._genes[index] = self.generate_gene(index)

    def create_genes(self) -> None:
        """Fill every slot through generate_gene()."""
        for index in range(self._length):
            self.create_gene(index)

    # ------------------------------------------------------------------
    # Structural mutation
    # ------------------------------------------------------------------

    def replace_gene(self, index: int, gene: Gene) -> None:
        """
        Replace the gene at `index` and reset fitness.

        Fitness is reset even when the new gene equals the old one.

        Args:
            index: Slot to overwrite, in [0, length)
            gene: New gene

        Raises:
            IndexError: If index is out of range
        """
        self._validate_index(index)
        self._genes[index] = gene
        self._invalidate_fitness()

    def replace_genes(self, start_index: int, genes: Sequence[Gene]) -> None:
        """
        Write `genes` into consecutive slots starting at `start_index`.

        Genes that would overflow the last slot are dropped without error.

        Args:
            start_index: First slot to overwrite, in [0, length)
            genes: Ordered genes to write

        Raises:
            ValueError: If genes is None
            IndexError: If start_index is out of range

        Example:
            >>> chromosome.length
            4
            >>> chromosome.replace_genes(3, [Gene(5), Gene(6)])  # Gene(6) dropped
        """
        if genes is None:
            raise ValueError("genes cannot be None")
        self._validate_index(start_index)

        count = min(len(genes), self._length - start_index)
        self._genes[start_index:start_index + count] = list(genes[:count])
        self._invalidate_fitness()

    def resize(self, new_length: int) -> None:
        """
        Change the number of gene slots and reset fitness.

        Shrinking drops genes from `new_length` onwards. Growing keeps every
        existing gene at its index and appends unset genes; new slots are not
        generated.

        Args:
            new_length: New number of genes (must be >= 2)

        Raises:
            ValueError: If new_length < 2
        """
        self._validate_length(new_length)

        if new_length < self._length:
            del self._genes[new_length:]
        else:
            self._genes.extend(Gene() for _ in range(new_length - self._length))

        self._length = new_length
        self._invalidate_fitness()

    def clone(self) -> 'ChromosomeBase':
        """
        Create an independent copy with the same length, genes and fitness.

        Returns:
            New chromosome built through create_new()
        """
        clone = self.create_new()
        if clone.length != self._length:
            clone.resize(self._length)
        clone.replace_genes(0, self.get_genes())
        clone.fitness = self._fitness

        return clone

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def compare_to(self, other: Optional['ChromosomeBase']) -> int:
        """
        Compare fitness with another chromosome.

        Returns:
            -1 if other is None
             0 if both fitness values are equal (both unset included)
             1 if both are set and this fitness is higher
            -1 otherwise
        """
        if other is None:
            return -1

        other_fitness = other.fitness
        if self._fitness == other_fitness:
            return 0

        if self._fitness is not None and other_fitness is not None and self._fitness > other_fitness:
            return 1

        return -1

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ChromosomeBase):
            return False
        return self.compare_to(other) == 0

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __lt__(self, other: Optional['ChromosomeBase']) -> bool:
        if other is not None and not isinstance(other, ChromosomeBase):
            return NotImplemented
        if self is other:
            return False
        if other is None:
            return False
        return self.compare_to(other) < 0

    def __gt__(self, other: Optional['ChromosomeBase']) -> bool:
        if other is not None and not isinstance(other, ChromosomeBase):
            return NotImplemented
        # Also answers the reflected `None < chromosome`, which is True.
        return not self == other and not self < other

    def __hash__(self) -> int:
        if self._fitness is None:
            return 0
        return hash(self._fitness)

    # ------------------------------------------------------------------
    # Validation helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_length(length: int) -> None:
        if length < MIN_LENGTH:
            raise ValueError(f"The minimum length for a chromosome is {MIN_LENGTH} genes.")

    def _validate_index(self, index: int) -> None:
        if index < 0 or index >= self._length:
            raise IndexError(f"There is no Gene on index {index} to be replaced.")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"{self.__class__.__name__}(length={self._length}, "
            f"fitness={self._fitness}, "
            f"genes=[{', '.join('_' if g.value is None else str(g) for g in self._genes)}])"
        )
