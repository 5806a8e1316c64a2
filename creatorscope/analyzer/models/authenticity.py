"""Data models for engagement authenticity reports."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

INSUFFICIENT_DATA_STATUS = "insufficient_data"


@dataclass(frozen=True)
class AuthenticityFlag:
    severity: str
    signal: str
    detail: str

    def to_dict(self) -> Dict[str, Any]:
        return {"severity": self.severity, "signal": self.signal, "detail": self.detail}


@dataclass(frozen=True)
class AuthenticityReport:
    """Computed authenticity score with the flags that reduced it."""
    score: int
    label: str
    flags: Tuple[AuthenticityFlag, ...]
    signals: Dict[str, Dict[str, Any]]
    videos_analyzed: int

    is_computed = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "label": self.label,
            "flags": [flag.to_dict() for flag in self.flags],
            "signals": {name: dict(values) for name, values in self.signals.items()},
            "videosAnalyzed": self.videos_analyzed,
        }


@dataclass(frozen=True)
class InsufficientAuthenticityData:
    """Returned instead of a score when there are too few usable videos."""
    note: str
    status: str = INSUFFICIENT_DATA_STATUS
    label: str = "Insufficient data"
    flags: Tuple[AuthenticityFlag, ...] = field(default_factory=tuple)

    is_computed = False

    @property
    def score(self) -> Optional[int]:
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": None,
            "status": self.status,
            "label": self.label,
            "note": self.note,
            "flags": [],
            "signals": {},
        }


AuthenticityResult = Union[AuthenticityReport, InsufficientAuthenticityData]
