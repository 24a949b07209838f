"""Solver settings.

Stored as JSON. Missing keys fall back to the defaults; a missing or broken
file yields the defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_FILE = Path("solver.json")


@dataclass(frozen=True)
class SolverSettings:
    """Tunable knobs for a solve and its replay.

    Attributes:
        progress_interval: Expansions between two progress notifications.
        replay_interval: Seconds between two replayed moves.
        max_depth: Largest threshold tried before giving up. Below the
            known diameter this ends in ``DEPTH_LIMIT``, not ``UNSOLVABLE``.
            ``None`` uses the known diameter for 2×2, 3×3 and 4×4 boards
            and no bound otherwise.
        timeout_sec: Wall-clock limit after which the search stops with
            ``TIMED_OUT``. The clock starts when the solve does.
    """

    progress_interval: int = 1000
    replay_interval: float = 0.3
    max_depth: int | None = None
    timeout_sec: float | None = None

    def __post_init__(self) -> None:
        if self.progress_interval < 1:
            raise ValueError("progress_interval must be at least 1")
        if self.replay_interval < 0:
            raise ValueError("replay_interval must not be negative")
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError("max_depth must not be negative")
        if self.timeout_sec is not None and self.timeout_sec <= 0:
            raise ValueError("timeout_sec must be positive")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SolverSettings:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown settings: %s", ", ".join(unknown))
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def override(self, **changes: Any) -> SolverSettings:
        """Return a copy with every non-``None`` change applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def load_settings(path: Path = DEFAULT_SETTINGS_FILE) -> SolverSettings:
    """Load settings from *path*, falling back to defaults on any problem."""
    if not path.exists():
        logger.debug("Settings file %s not found, using defaults", path)
        return SolverSettings()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("top-level JSON value must be an object")
        settings = SolverSettings.from_dict(data)
    except (OSError, ValueError, TypeError) as e:
        logger.warning("Failed to load settings from %s: %s, using defaults", path, e)
        return SolverSettings()

    logger.debug("Settings loaded: %s", settings)
    return settings


def save_settings(settings: SolverSettings, path: Path = DEFAULT_SETTINGS_FILE) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(settings.to_dict(), indent=2) + "\n", encoding="utf-8")
    logger.debug("Settings saved to %s", path)
