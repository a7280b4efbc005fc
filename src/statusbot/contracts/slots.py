"""
Slot Contracts

SlotSet is the only state a flow instance owns; RecognizerResult is the
per-utterance output of the recognizer used to seed it.
"""

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, Optional, Tuple

# Fixed collection order
SLOT_ORDER: Tuple[str, ...] = ("project", "suite", "status", "category", "date")

# Recognizer entity category -> slot name
ENTITY_ALIASES: Dict[str, str] = {
    "project": "project",
    "suite": "suite",
    "status": "status",
    "category": "category",
    "item": "category",
    "date": "date",
    "day": "date",
    "datetime": "date",
}


def _clean(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass
class SlotSet:
    project: Optional[str] = None
    suite: Optional[str] = None
    status: Optional[str] = None
    category: Optional[str] = None
    date: Optional[str] = None

    def is_empty(self, name: str) -> bool:
        """A slot is empty when unset or blank."""
        return _clean(getattr(self, name)) is None

    def missing(self) -> Tuple[str, ...]:
        return tuple(name for name in SLOT_ORDER if self.is_empty(name))

    def to_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SlotSet":
        data = data or {}
        names = {f.name for f in fields(cls)}
        return cls(**{k: _clean(v) for k, v in data.items() if k in names})


@dataclass
class RecognizerResult:
    top_intent: str
    entities: Dict[str, str] = field(default_factory=dict)
    score: Optional[float] = None

    def to_slot_set(self) -> SlotSet:
        """Seed a SlotSet from the extracted entities; absent ones stay empty."""
        values: Dict[str, str] = {}
        for category, value in self.entities.items():
            slot = ENTITY_ALIASES.get(category.strip().lower())
            cleaned = _clean(value)
            # First extraction wins when aliases collide
            if slot and cleaned and slot not in values:
                values[slot] = cleaned
        return SlotSet(**values)
