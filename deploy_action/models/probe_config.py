from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class ProbeConfig:
    """Readiness or liveness check. ``None`` means not configured, never zero."""
    path: Optional[str] = None
    command: Optional[List[str]] = None
    period_seconds: Optional[int] = None
    initial_delay_seconds: Optional[int] = None
    timeout_seconds: Optional[int] = None

    def is_configured(self):
        return any(value is not None for value in (self.path, self.command, self.period_seconds,
                                                   self.initial_delay_seconds, self.timeout_seconds))

    def to_dict(self):
        payload = {
            "path": self.path,
            "command": list(self.command) if self.command is not None else None,
            "periodSeconds": self.period_seconds,
            "initialDelaySeconds": self.initial_delay_seconds,
            "timeoutSeconds": self.timeout_seconds,
        }
        return {key: value for key, value in payload.items() if value is not None}
