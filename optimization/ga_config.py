"""
Genetic Algorithm Configuration Management

Provides GAConfig dataclass for loading and validating population and
chromosome parameters from YAML configuration files.
"""

from dataclasses import dataclass, field
from typing import Dict, Any
from pathlib import Path
import yaml

from chromosomes.chromosome_base import MIN_LENGTH


@dataclass
class GAConfig:
    """Genetic Algorithm configuration loaded from YAML.

    Supports nested configuration structure matching config/default.yaml.

    Attributes:
        name: Configuration name/identifier
        description: Human-readable description
        version: Configuration version

        # Population
        population_size: Number of individuals in population
        elite_count: Number of elite individuals to preserve

        # Chromosome
        chromosome_length: Number of genes per chromosome (>= 2)

        # Logging
        logging_verbose: Print progress from population management

    Example:
        >>> config = GAConfig.from_yaml('config/default.yaml')
        >>> print(f"Population size: {config.population_size}")
        >>> print(f"Chromosome length: {config.chromosome_length}")
    """

    # Metadata
    name: str = "ga_default"
    description: str = ""
    version: str = "1.0.0"

    # Population settings
    population_size: int = 50
    elite_count: int = 4

    # Chromosome structure
    chromosome_length: int = 10

    # Logging
    logging_verbose: bool = False

    # Raw YAML data (for debugging)
    _raw_data: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_yaml(cls, yaml_path: str) -> 'GAConfig':
        """Load GA configuration from YAML file.

        Args:
            yaml_path: Path to GA configuration YAML file

        Returns:
            GAConfig instance with parameters loaded from YAML

        Raises:
            FileNotFoundError: If YAML file not found
            ValueError: If YAML is empty or parameters are invalid
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"GA config file not found: {yaml_path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        if data is None:
            raise ValueError(f"Empty or invalid YAML file: {yaml_path}")

        config_kwargs = {
            # Metadata
            'name': data.get('name', 'ga_default'),
            'description': data.get('description', ''),
            'version': data.get('version', '1.0.0'),

            # Population
            'population_size': data.get('population', {}).get('size', 50),
            'elite_count': data.get('population', {}).get('elite_count', 4),

            # Chromosome
            'chromosome_length': data.get('chromosome', {}).get('length', 10),

            # Logging
            'logging_verbose': data.get('logging', {}).get('verbose', False),

            '_raw_data': data
        }

        config = cls(**config_kwargs)
        config.validate()

        return config

    def validate(self) -> None:
        """Validate configuration parameters.

        Raises:
            ValueError: If any parameters are invalid
        """
        if self.population_size < 2:
            raise ValueError(f"population_size must be at least 2, got {self.population_size}")

        if self.elite_count < 0:
            raise ValueError(f"elite_count must be non-negative, got {self.elite_count}")

        if self.elite_count > self.population_size:
            raise ValueError(
                f"elite_count ({self.elite_count}) cannot exceed population_size ({self.population_size})"
            )

        if self.chromosome_length < MIN_LENGTH:
            raise ValueError(
                f"chromosome_length must be at least {MIN_LENGTH}, got {self.chromosome_length}"
            )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"GAConfig(name='{self.name}', "
            f"pop={self.population_size}, "
            f"elite={self.elite_count}, "
            f"length={self.chromosome_length})"
        )
