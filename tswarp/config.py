"""
Configuration schemas for YAML-driven tswarp runs.

Provides validated configuration classes using dataclasses.

Example YAML::

    input:
      path: data/series.csv
      skip_header: false
    engine:
      strategy: rolling_row
      metric: squared
    parallel:
      n_jobs: -1
    report:
      time_unit: ms
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict

import yaml

from .core.engine import DTWEngine, Metric, Strategy
from .errors import ConfigError


@dataclass
class InputConfig:
    """Input file configuration."""
    path: str
    delimiter: str = ","
    skip_header: bool = False

    def __post_init__(self):
        """Validate input configuration."""
        if not self.path:
            raise ValueError("Input path is required")
        if len(self.delimiter) != 1:
            raise ValueError(f"delimiter must be a single character, got {self.delimiter!r}")


@dataclass
class EngineConfig:
    """DTW engine configuration."""
    strategy: str = Strategy.ROLLING_ROW.value
    metric: str = Metric.SQUARED.value

    def __post_init__(self):
        """Validate engine configuration."""
        valid_strategy = {s.value for s in Strategy}
        if self.strategy not in valid_strategy:
            raise ValueError(f"strategy must be one of {valid_strategy}, got {self.strategy}")

        valid_metric = {m.value for m in Metric}
        if self.metric not in valid_metric:
            raise ValueError(f"metric must be one of {valid_metric}, got {self.metric}")


@dataclass
class ParallelConfig:
    """Pair dispatch configuration."""
    n_jobs: int = 1
    backend: str = "threading"
    progress: bool = False

    def __post_init__(self):
        """Validate parallel configuration."""
        if self.n_jobs == 0:
            raise ValueError("n_jobs must be non-zero")
        valid_backend = {"threading", "loky", "sequential"}
        if self.backend not in valid_backend:
            raise ValueError(f"backend must be one of {valid_backend}, got {self.backend}")


@dataclass
class ReportConfig:
    """Result reporting configuration."""
    time_unit: str = "ms"

    def __post_init__(self):
        """Validate report configuration."""
        valid_unit = {"ms", "s"}
        if self.time_unit not in valid_unit:
            raise ValueError(f"time_unit must be one of {valid_unit}, got {self.time_unit}")


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "WARNING"

    def __post_init__(self):
        """Validate logging configuration."""
        self.level = self.level.upper()
        valid_level = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.level not in valid_level:
            raise ValueError(f"level must be one of {valid_level}, got {self.level}")


@dataclass
class RunConfig:
    """Complete run configuration."""
    input: InputConfig
    engine: EngineConfig = field(default_factory=EngineConfig)
    parallel: ParallelConfig = field(default_factory=ParallelConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> RunConfig:
        """Create RunConfig from dictionary (e.g., from YAML)."""
        return cls(
            input=InputConfig(**data['input']),
            engine=EngineConfig(**data.get('engine', {})),
            parallel=ParallelConfig(**data.get('parallel', {})),
            report=ReportConfig(**data.get('report', {})),
            logging=LoggingConfig(**data.get('logging', {}))
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> RunConfig:
        """Load configuration from YAML file."""
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise ConfigError(f"Config file not found: {yaml_path}")

        try:
            with open(yaml_path, 'r') as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot load {yaml_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"{yaml_path} must contain a mapping at top level")
        if 'input' not in data:
            raise ConfigError("Missing required section: input")

        try:
            return cls.from_dict(data)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration in {yaml_path}: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)

    def build_engine(self) -> DTWEngine:
        return DTWEngine(strategy=self.engine.strategy, metric=self.engine.metric)
