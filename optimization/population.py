"""
Population Management for Genetic Algorithm

Holds one generation of chromosomes and answers questions about it through
the chromosome contract only (create_new, fitness, ordering, genes):
- Population initialization from an adam chromosome
- Fitness assignment
- Elitism selection
- Statistical analysis
- Diversity measurement
"""

from typing import List, Dict, Optional
import numpy as np

from chromosomes.chromosome_base import ChromosomeBase
from chromosomes.extensions import validate_genes
from optimization.ga_config import GAConfig


class Population:
    """Manages a population of chromosomes for genetic algorithm optimization.

    Fitness is stored on each chromosome, so any structural edit made by an
    external operator automatically marks that individual as unevaluated.

    Attributes:
        size: Number of individuals in the population
        adam: Prototype chromosome every individual is created from
        elite_count: Default number of individuals returned by get_top_k()
        chromosomes: List of chromosomes in the current generation
        generation: Current generation number
        verbose: Print progress messages

    Example:
        >>> pop = Population(size=50, adam=MyChromosome(10))
        >>> pop.initialize()
        >>> pop.update_fitness(0, 0.85)
        >>> best = pop.get_best()
        >>> elite = pop.get_top_k(k=4)
    """

    def __init__(
        self,
        size: int,
        adam: ChromosomeBase,
        elite_count: int = 4,
        verbose: bool = False
    ):
        """Initialize population with given parameters.

        Args:
            size: Population size (must be >= 2)
            adam: Prototype chromosome used to spawn individuals
            elite_count: Default k for get_top_k()
            verbose: Print progress messages

        Raises:
            ValueError: If size < 2 or adam is None
        """
        if size < 2:
            raise ValueError(f"Population size must be at least 2, got {size}")
        if adam is None:
            raise ValueError("Adam chromosome cannot be None")

        self.size = size
        self.adam = adam
        self.elite_count = elite_count
        self.verbose = verbose

        self.chromosomes: List[ChromosomeBase] = []
        self.generation = 0

    @classmethod
    def from_config(cls, config: GAConfig, adam: ChromosomeBase) -> 'Population':
        """Build a population sized by `config`.

        Raises:
            ValueError: If adam's length differs from config.chromosome_length
        """
        if adam is not None and adam.length != config.chromosome_length:
            raise ValueError(
                f"Adam chromosome length ({adam.length}) does not match "
                f"chromosome_length ({config.chromosome_length})"
            )

        return cls(
            size=config.population_size,
            adam=adam,
            elite_count=config.elite_count,
            verbose=config.logging_verbose
        )

    def initialize(self) -> None:
        """Create `size` new chromosomes from the adam chromosome.

        Raises:
            ValueError: If create_new() returns None or leaves any gene unset
        """
        chromosomes = []
        for _ in range(self.size):
            chromosome = self.adam.create_new()
            if chromosome is None:
                raise ValueError("The adam chromosome's 'create_new' method generated a None chromosome.")
            validate_genes(chromosome)
            chromosomes.append(chromosome)

        self.chromosomes = chromosomes
        self.generation = 0

        if self.verbose:
            print(f"Initialized population of {self.size} x {self.adam.__class__.__name__} "
                  f"(length={self.adam.length})")

    def update_fitness(self, idx: int, fitness: float) -> None:
        """Assign fitness to a specific individual.

        Args:
            idx: Index of individual to update (0-indexed)
            fitness: New fitness value (higher is better)

        Raises:
            IndexError: If idx is out of bounds
            ValueError: If fitness is NaN or infinite
        """
        if idx < 0 or idx >= len(self.chromosomes):
            raise IndexError(f"Index {idx} out of bounds for population size {len(self.chromosomes)}")

        if np.isnan(fitness) or np.isinf(fitness):
            raise ValueError(f"Invalid fitness value: {fitness}")

        self.chromosomes[idx].fitness = fitness

    def _evaluated(self) -> List[ChromosomeBase]:
        return [c for c in self.chromosomes if c.fitness is not None]

    def get_top_k(self, k: Optional[int] = None) -> List[ChromosomeBase]:
        """Get the k best individuals (elite selection).

        Evaluated chromosomes are ranked by their ordering, best first;
        unevaluated ones follow in population order.

        Args:
            k: Number of top individuals to return (default: elite_count)

        Returns:
            List of chromosomes (not copies)

        Raises:
            ValueError: If k <= 0 or k > population size
        """
        if k is None:
            k = self.elite_count
        if k <= 0:
            raise ValueError(f"k must be positive, got {k}")
        if k > self.size:
            raise ValueError(f"k ({k}) cannot exceed population size ({self.size})")

        ranked = sorted(self._evaluated(), reverse=True)
        ranked.extend(c for c in self.chromosomes if c.fitness is None)

        return ranked[:k]

    def get_best(self) -> ChromosomeBase:
        """Get the evaluated individual with the highest fitness.

        Raises:
            ValueError: If no chromosome has been evaluated
        """
        evaluated = self._evaluated()
        if not evaluated:
            raise ValueError("No evaluated chromosomes in population")
        return max(evaluated)

    def get_worst(self) -> ChromosomeBase:
        """Get the evaluated individual with the lowest fitness.

        Raises:
            ValueError: If no chromosome has been evaluated
        """
        evaluated = self._evaluated()
        if not evaluated:
            raise ValueError("No evaluated chromosomes in population")
        return min(evaluated)

    def get_statistics(self) -> Dict[str, float]:
        """Compute fitness statistics over evaluated chromosomes.

        Returns:
            Dictionary with keys 'best', 'mean', 'worst', 'std', 'median'
            (all 0.0 when nothing is evaluated)
        """
        scores = [c.fitness for c in self._evaluated()]
        if len(scores) == 0:
            return {
                'best': 0.0,
                'mean': 0.0,
                'worst': 0.0,
                'std': 0.0,
                'median': 0.0
            }

        fitness_array = np.array(scores, dtype=float)

        return {
            'best': float(np.max(fitness_array)),
            'mean': float(np.mean(fitness_array)),
            'worst': float(np.min(fitness_array)),
            'std': float(np.std(fitness_array)),
            'median': float(np.median(fitness_array))
        }

    def compute_diversity(self) -> float:
        """Compute population diversity from gene values.

        Average pairwise Hamming distance, normalized by chromosome length.

        Returns:
            0.0 when all chromosomes are identical, up to 1.0

        Raises:
            ValueError: If chromosomes have different lengths
        """
        if len(self.chromosomes) < 2:
            return 0.0

        lengths = {c.length for c in self.chromosomes}
        if len(lengths) != 1:
            raise ValueError(f"Diversity needs equal chromosome lengths, got {sorted(lengths)}")
        n_genes = lengths.pop()

        n = len(self.chromosomes)

        # Filled cell by cell so sequence values stay single elements
        genes = np.empty((n, n_genes), dtype=object)
        for i, chrom in enumerate(self.chromosomes):
            for j, gene in enumerate(chrom.get_genes()):
                genes[i, j] = gene.value

        total_distance = 0.0
        pair_count = 0

        for i in range(n):
            for j in range(i + 1, n):
                total_distance += np.sum(genes[i] != genes[j])
                pair_count += 1

        return float(total_distance / pair_count / n_genes)

    def replace(self, new_chromosomes: List[ChromosomeBase]) -> None:
        """Replace the entire population with the next generation.

        Args:
            new_chromosomes: List of new chromosomes (must have length == size)

        Raises:
            ValueError: If new population size doesn't match
        """
        if len(new_chromosomes) != self.size:
            raise ValueError(
                f"New population size ({len(new_chromosomes)}) "
                f"must match original size ({self.size})"
            )

        self.chromosomes = list(new_chromosomes)
        self.generation += 1

        if self.verbose:
            print(f"Generation {self.generation}: {self.size} chromosomes, "
                  f"{len(self._evaluated())} already evaluated")

    def __len__(self) -> int:
        """Return number of chromosomes currently held."""
        return len(self.chromosomes)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"Population(size={self.size}, "
            f"gen={self.generation}, "
            f"adam={self.adam.__class__.__name__})"
        )
