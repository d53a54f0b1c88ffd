"""Solver configuration."""

from __future__ import annotations
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping
import json

from .core.exceptions import InvalidConfiguration

STRATEGIES = ("recursive", "iterative")


@dataclass
class SolverConfig:
    """
    Options for a solve attempt.

    Attributes:
        strategy: "recursive" backtracks on the call stack, "iterative"
            keeps an explicit stack of frames (safer for very large boards).
        validate_seeds: Raise InvalidConfiguration on seeds that repeat a
            value in a row, column or block instead of reporting the board
            as unsolvable.
        animate: Redraw the board on the console for every search event.
        delay: Seconds to pause between animation frames.
    """
    strategy: str = "recursive"
    validate_seeds: bool = False
    animate: bool = False
    delay: float = 0.01

    def __post_init__(self):
        if self.strategy not in STRATEGIES:
            raise InvalidConfiguration(
                f"strategy must be one of {STRATEGIES}, got {self.strategy!r}"
            )
        for name in ("validate_seeds", "animate"):
            if not isinstance(getattr(self, name), bool):
                raise InvalidConfiguration(
                    f"{name} must be true or false, got {getattr(self, name)!r}"
                )
        if (isinstance(self.delay, bool) or not isinstance(self.delay, (int, float))
                or self.delay < 0):
            raise InvalidConfiguration(f"delay must be a non-negative number, got {self.delay!r}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SolverConfig:
        """
        Build a config from a mapping, rejecting unknown keys.

        Raises:
            InvalidConfiguration: On unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise InvalidConfiguration(f"Unknown config keys: {sorted(unknown)}")
        return cls(**data)

    @classmethod
    def from_json(cls, path: str) -> SolverConfig:
        """Load a config from a JSON file holding a single object."""
        try:
            with open(path, "r") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidConfiguration(f"Could not parse config {path}: {e}") from e
        if not isinstance(data, dict):
            raise InvalidConfiguration(f"Config {path} must contain a JSON object")
        return cls.from_dict(data)

    def merged(self, **overrides: Any) -> SolverConfig:
        """Return a copy with every non-None override applied."""
        data = self.to_dict()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return SolverConfig.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
