"""
Data models for the entry-requirements interchange document.

These are intentionally lightweight (stdlib dataclasses) and map one-to-one to
the camelCase JSON keys written by the fetcher. Keys the models do not know
about are kept in ``extra`` and written back unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .categories import Color
from .tristate import TriState

RECORD_KEYS = ("country", "cca3", "cca2", "source", "visaText", "healthText", "extracted", "color")
DATASET_KEYS = ("generatedAt", "total", "results")


def parse_days(value: Any) -> Optional[int]:
    """Accept only non-negative integers; anything else is unknown."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if value < 0:
        return None
    return value


@dataclass
class ExtractedFacts:
    visa_required: TriState = TriState.UNKNOWN
    visa_free_days: Optional[int] = None
    e_authorization_required: TriState = TriState.UNKNOWN
    vaccines_required: TriState = TriState.UNKNOWN

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ExtractedFacts":
        data = data if isinstance(data, dict) else {}
        return cls(
            visa_required=TriState.from_json(data.get("visaRequired")),
            visa_free_days=parse_days(data.get("visaFreeDays")),
            e_authorization_required=TriState.from_json(data.get("eAuthorizationRequired")),
            vaccines_required=TriState.from_json(data.get("vaccinesRequired")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "visaRequired": self.visa_required.to_json(),
            "visaFreeDays": self.visa_free_days,
            "eAuthorizationRequired": self.e_authorization_required.to_json(),
            "vaccinesRequired": self.vaccines_required.to_json(),
        }


@dataclass
class EntryRecord:
    country: str
    cca3: str
    cca2: Optional[str] = None
    source: Optional[str] = None
    visa_text: Optional[str] = None
    health_text: Optional[str] = None
    extracted: ExtractedFacts = field(default_factory=ExtractedFacts)
    color: Optional[Color] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EntryRecord":
        return cls(
            country=data.get("country") or "",
            cca3=data.get("cca3") or "",
            cca2=data.get("cca2"),
            source=data.get("source"),
            visa_text=data.get("visaText"),
            health_text=data.get("healthText"),
            extracted=ExtractedFacts.from_dict(data.get("extracted")),
            color=Color.parse(data.get("color")),
            extra={k: v for k, v in data.items() if k not in RECORD_KEYS},
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "country": self.country,
            "cca3": self.cca3,
        }
        if self.cca2 is not None:
            out["cca2"] = self.cca2
        out["source"] = self.source
        out["visaText"] = self.visa_text
        out["healthText"] = self.health_text
        out["extracted"] = self.extracted.to_dict()
        out["color"] = self.color.value if self.color else None
        out.update(self.extra)
        return out


@dataclass
class EntryDataset:
    generated_at: Optional[str] = None
    results: List[EntryRecord] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return len(self.results)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EntryDataset":
        return cls(
            generated_at=data.get("generatedAt"),
            results=[EntryRecord.from_dict(r) for r in data.get("results") or []],
            extra={k: v for k, v in data.items() if k not in DATASET_KEYS},
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "generatedAt": self.generated_at,
            "total": self.total,
            "results": [r.to_dict() for r in self.results],
        }
        out.update(self.extra)
        return out
