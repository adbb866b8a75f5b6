"""
Severe-weather alert models.

The provider nests alerts as `{"alerts": {"alert": [...]}}`; each entry maps
1:1 onto an Alert and the order of the upstream list is preserved.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Tuple

# Alert attribute -> upstream key
ALERT_FIELDS = {
    "headline": "headline",
    "message_type": "msgtype",
    "description": "desc",
    "severity": "severity",
    "urgency": "urgency",
    "areas": "areas",
    "category": "category",
    "certainty": "certainty",
    "event": "event",
    "note": "note",
    "effective_time": "effective",
    "expires_time": "expires",
    "instruction": "instruction",
}


@dataclass(frozen=True)
class Alert:
    headline: str
    message_type: str
    description: str
    severity: str
    urgency: str
    areas: str
    category: str
    certainty: str
    event: str
    note: str
    effective_time: str
    expires_time: str
    instruction: str

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "Alert":
        if not isinstance(payload, dict):
            raise TypeError(f"Alert entry must be an object, got {type(payload).__name__}")
        values = {}
        for name, key in ALERT_FIELDS.items():
            value = payload.get(key)
            values[name] = "" if value is None else str(value)
        return cls(**values)


@dataclass(frozen=True)
class Alerts:
    """Ordered alerts for a location; empty when nothing is in effect."""

    alerts: Tuple[Alert, ...] = ()

    def __len__(self) -> int:
        return len(self.alerts)

    def __iter__(self) -> Iterator[Alert]:
        return iter(self.alerts)

    def __getitem__(self, index: int) -> Alert:
        return self.alerts[index]

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "Alerts":
        """Map `{"alerts": {"alert": [...]}}`; raises on a malformed payload."""
        entries = payload["alerts"]["alert"]
        if not isinstance(entries, list):
            raise TypeError("alerts.alert must be a list")
        return cls(alerts=tuple(Alert.from_response(entry) for entry in entries))
