"""
settings.py — Playground Settings
==================================
Every tunable number of the playground lives here: array bounds, the
per-algorithm step delays, playback speed and the server address.

    from settings import SETTINGS
    SETTINGS.size_bounds      # (5, 50)

The defaults match the classroom page.  A few of them can be overridden
from the environment so the same code runs quietly in class and noisily
while debugging:

    PLAYGROUND_DEBUG=1        – DEBUG logging + Flask debug mode
    PLAYGROUND_HOST / _PORT   – where the Flask app listens
    PLAYGROUND_SPEED          – default playback speed preset
    PLAYGROUND_MAX_SESSIONS   – browser sessions the web app keeps in memory
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Tuple


# ---------------------------------------------------------------------------
# Step delays (milliseconds) — one entry per algorithm key
# ---------------------------------------------------------------------------
STEP_DELAYS_MS: Dict[str, int] = {
    "linear_search": 120,
    "bubble_sort":   80,
    "binary_search": 160,
}


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class PlaygroundSettings:
    # array generation
    size_bounds:       Tuple[int, int] = (5, 50)
    default_size:      int             = 15
    max_value_bounds:  Tuple[int, int] = (10, 999)
    default_max_value: int             = 99
    min_value:         int             = 1

    # animation
    step_delays_ms:    Dict[str, int]  = field(default_factory=lambda: dict(STEP_DELAYS_MS))
    default_speed:     str             = "normal"

    # server
    debug:             bool            = False
    host:              str             = "127.0.0.1"
    port:              int             = 5000
    max_sessions:      int             = 256      # browser sessions kept in memory

    def delay_for(self, algo_key: str) -> int:
        return self.step_delays_ms.get(algo_key, 100)

    @classmethod
    def from_env(cls) -> "PlaygroundSettings":
        """Defaults overlaid with the PLAYGROUND_* environment variables."""
        port_raw = os.environ.get("PLAYGROUND_PORT", "")
        sessions_raw = os.environ.get("PLAYGROUND_MAX_SESSIONS", "")
        return cls(
            debug=_env_flag("PLAYGROUND_DEBUG"),
            host=os.environ.get("PLAYGROUND_HOST", cls.host),
            port=int(port_raw) if port_raw.isdigit() else cls.port,
            default_speed=os.environ.get("PLAYGROUND_SPEED", cls.default_speed),
            max_sessions=int(sessions_raw) if sessions_raw.isdigit() else cls.max_sessions,
        )


SETTINGS = PlaygroundSettings()
