"""
Simulation configuration.

A SimulationConfig holds the parameters of one threshold estimate and can be
loaded from a YAML file:

    n: 200
    trials: 100
    seed: 42          # optional
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import InvalidArgument, require_positive


CONFIG_KEYS = ('n', 'trials', 'seed')


class SimulationConfig:
    """
    Loads and validates a simulation configuration.

    Example:
        config = SimulationConfig.from_yaml('config/grid_200.yaml')
        print(config.n, config.trials)
    """

    def __init__(self, data: Dict[str, Any]):
        if not isinstance(data, dict):
            raise InvalidArgument(f"Config must be a mapping, got: {type(data).__name__}")
        self._data = data
        self._validate()

    @classmethod
    def from_yaml(cls, path: str) -> 'SimulationConfig':
        """Load simulation config from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Simulation config not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        return cls(data)

    def _validate(self):
        """Validate required keys and their ranges."""
        unknown = sorted(str(key) for key in self._data if key not in CONFIG_KEYS)
        if unknown:
            raise InvalidArgument(f"Unknown config keys: {unknown}. Allowed: {list(CONFIG_KEYS)}")

        for key in ['n', 'trials']:
            if key not in self._data:
                raise InvalidArgument(f"Missing required config key: '{key}'")
            require_positive(key, self._data[key])

        seed = self._data.get('seed')
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int) or seed < 0):
            raise InvalidArgument(f"seed must be a non-negative integer, provided: {seed!r}")

    # --- Properties ---

    @property
    def n(self) -> int:
        return int(self._data['n'])

    @property
    def trials(self) -> int:
        return int(self._data['trials'])

    @property
    def seed(self) -> Optional[int]:
        return self._data.get('seed')

    def to_dict(self) -> Dict[str, Any]:
        return {
            'n': self.n,
            'trials': self.trials,
            'seed': self.seed,
        }
