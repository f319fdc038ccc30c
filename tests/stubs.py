"""Minimal chromosome encodings used across the test suite."""

import numpy as np

from chromosomes.chromosome_base import ChromosomeBase
from chromosomes.gene import Gene


class ChromosomeStub(ChromosomeBase):
    """Encoding whose generated gene is its own index; genes start unset.

    create_new() always returns the default 2-gene layout.
    """

    def __init__(self, fitness=None, length=2):
        super().__init__(length)
        self.fitness = fitness

    def generate_gene(self, index):
        return Gene(index)

    def create_new(self):
        return ChromosomeStub()


class IntegerChromosomeStub(ChromosomeBase):
    """Random integer genes in [0, max_value), generated at construction."""

    def __init__(self, length=6, max_value=10, rng=None):
        super().__init__(length)
        self.max_value = max_value
        self.rng = rng if rng is not None else np.random.default_rng(42)
        self.create_genes()

    def generate_gene(self, index):
        return Gene(int(self.rng.integers(0, self.max_value)))

    def create_new(self):
        return IntegerChromosomeStub(self.length, self.max_value, self.rng)


class UnsetGeneChromosomeStub(ChromosomeStub):
    """Encoding that never fills its genes."""

    def create_new(self):
        return UnsetGeneChromosomeStub(length=self.length)


class NoneFactoryChromosomeStub(IntegerChromosomeStub):
    """Encoding whose create_new() returns nothing."""

    def create_new(self):
        return None
