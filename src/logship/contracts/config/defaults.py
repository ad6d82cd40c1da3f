# src/logship/contracts/config/defaults.py
"""Default value registry for runtime configuration.

INTERNAL_DEFAULTS holds values hardcoded in runtime config and NOT exposed
in Settings.
"""

from typing import Final

INTERNAL_DEFAULTS: Final[dict[str, dict[str, int | float | bool | str]]] = {
    "queue": {
        # Each append must carry the sequence token returned by the previous
        # append to the same stream, so only one request can be in flight.
        "concurrency": 1,
        "enabled": True,
    },
}

