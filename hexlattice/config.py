"""
Plot configuration for hexagon lattices.

Usage:
    config = PlotConfig.from_yaml('configs/plot.yaml')
    ax = plot_lattice(lattice, config=config)
"""

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

import yaml

logger = logging.getLogger(__name__)


@dataclass
class PlotConfig:
    """Styling for hexagon edge plots."""
    edgecolor: str = "black"
    linewidth: float = 0.5
    figsize: Tuple[float, float] = (8.0, 8.0)
    aspect: str = "equal"
    title: Optional[str] = None

    def __post_init__(self):
        self.figsize = tuple(float(v) for v in self.figsize)
        if len(self.figsize) != 2:
            raise ValueError(f"figsize must have two elements, got {self.figsize}")
        if self.linewidth < 0:
            raise ValueError(f"linewidth must be >= 0, got {self.linewidth}")

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> 'PlotConfig':
        """Load configuration from YAML file."""
        with open(yaml_path, 'r') as f:
            config_data = yaml.safe_load(f) or {}

        logger.debug(f"Loaded plot config from {yaml_path}: {config_data}")
        return cls(**config_data)

    def save_yaml(self, yaml_path: Union[str, Path]):
        """Save configuration to YAML file."""
        config_dict = asdict(self)
        config_dict['figsize'] = list(self.figsize)

        with open(yaml_path, 'w') as f:
            yaml.safe_dump(config_dict, f, default_flow_style=False, sort_keys=False)
