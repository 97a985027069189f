from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalyticsConfig:
    # oldest events are dropped once the log holds this many
    max_events: int = 1000


DEFAULT_ANALYTICS_CONFIG = AnalyticsConfig()
