"""Population management and GA configuration built on the chromosome contract."""

from .ga_config import GAConfig
from .population import Population

__all__ = ["GAConfig", "Population"]
