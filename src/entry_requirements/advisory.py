"""
Build unclassified entry records from saved travel-advisory payloads.

A payload is the per-country JSON document published by the advisory site
(``schede_paese/<CCA3>.json``). Sections live under ``nodi`` mappings whose
values carry a ``titolo`` (heading) and ``contenuto`` (HTML body). Fetching the
payloads is done elsewhere; this module only turns saved payloads into the
interchange format with every fact left unset.
"""

import json
import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence

from bs4 import BeautifulSoup

from .models import EntryDataset, EntryRecord

logger = logging.getLogger(__name__)

ADVISORY_URL = "https://www.viaggiaresicuri.it/schede_paese"

VISA_SECTION_PATTERNS = [
    re.compile(r"visto", re.IGNORECASE),
    re.compile(r"documenti", re.IGNORECASE),
    re.compile(r"passaporto", re.IGNORECASE),
    re.compile(r"ingresso", re.IGNORECASE),
]
HEALTH_SECTION_PATTERNS = [
    re.compile(r"vaccinazioni", re.IGNORECASE),
]


class AdvisoryPayloadError(Exception):
    """Raised when an advisory payload is not a JSON object."""

    def __init__(self, cca3: str, message: str):
        self.cca3 = cca3
        self.message = message
        super().__init__(f"{cca3}: {message}")


class CountryIndexError(Exception):
    """Raised when a countries file is not a list of objects."""
    pass


def html_to_text(html: Optional[str]) -> Optional[str]:
    """Flatten an HTML fragment to a single line of text.

    Returns None for empty fragments and for placeholder bodies made only of
    dots and dashes.
    """
    if not html:
        return None
    soup = BeautifulSoup(html, "lxml")
    text = re.sub(r"\s+", " ", soup.get_text()).strip()
    if not text:
        return None
    if not re.sub(r"[.\-]", "", text).strip():
        return None
    return text


def pick_section(nodes: Any, patterns: Sequence["re.Pattern[str]"]) -> Optional[str]:
    """Text of the first node whose heading matches, trying patterns in order."""
    if not isinstance(nodes, dict):
        return None
    entries = list(nodes.values())
    for pattern in patterns:
        for node in entries:
            if not isinstance(node, dict):
                continue
            title = node.get("titolo")
            if isinstance(title, str) and pattern.search(title):
                if node.get("contenuto"):
                    return html_to_text(node["contenuto"])
                break
    return None


def _section_nodes(payload: Dict[str, Any], key: str) -> Any:
    section = payload.get(key)
    if isinstance(section, dict):
        return section.get("nodi")
    return None


def build_entry(
    payload: Any,
    country: str,
    cca3: str,
    cca2: Optional[str] = None,
    source: Optional[str] = None,
    fetched_at: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Turn one advisory payload into an unclassified entry record.

    Raises:
        AdvisoryPayloadError: If payload is not a JSON object
    """
    if not isinstance(payload, dict):
        raise AdvisoryPayloadError(cca3, "payload must be a JSON object")

    fetched_at = fetched_at or datetime.now(timezone.utc)
    return {
        "country": country,
        "cca3": cca3,
        "cca2": cca2,
        "source": source or f"{ADVISORY_URL}/{cca3}.json",
        "visaText": pick_section(_section_nodes(payload, "infoRequisitiIngresso"), VISA_SECTION_PATTERNS),
        "healthText": pick_section(_section_nodes(payload, "infoSituazioneSanitaria"), HEALTH_SECTION_PATTERNS),
        "extracted": {
            "visaRequired": None,
            "visaFreeDays": None,
            "eAuthorizationRequired": None,
            "vaccinesRequired": None,
        },
        "color": None,
        "fetchedAt": fetched_at.isoformat(),
    }


def build_dataset(entries: List[Dict[str, Any]], generated_at: Optional[datetime] = None) -> Dict[str, Any]:
    """Wrap records in the interchange document; error records get null facts too."""
    generated_at = generated_at or datetime.now(timezone.utc)
    dataset = EntryDataset(
        generated_at=generated_at.isoformat(),
        results=[EntryRecord.from_dict(e) for e in entries],
    )
    return dataset.to_dict()


def load_country_index(path: Optional[Path]) -> Dict[str, Dict[str, Any]]:
    """Load a JSON list of ``{cca3, cca2, name}`` objects keyed by upper-case cca3.

    Raises:
        CountryIndexError: If the file is not a list of objects
    """
    if path is None:
        return {}
    with open(path, "r", encoding="utf-8") as f:
        items = json.load(f)
    if not isinstance(items, list):
        raise CountryIndexError(f"{path}: expected a JSON list of country objects")
    index = {}
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            raise CountryIndexError(f"{path}: entry {i} is not an object")
        code = str(item.get("cca3", "")).upper()
        if code:
            index[code] = item
    return index


def build_from_directory(
    payload_dir: Path,
    countries: Optional[Dict[str, Dict[str, Any]]] = None,
    only: Optional[str] = None,
    skip: Iterable[str] = ("ITA",),
) -> Dict[str, Any]:
    """Build a dataset from ``<CCA3>.json`` payload files in a directory.

    Args:
        payload_dir: Directory holding one payload file per country
        countries: Optional country index from load_country_index()
        only: Restrict to one country (cca3 or cca2, any case)
        skip: cca3 codes to leave out (the advisory's home country)

    Returns:
        Interchange document with unclassified records sorted by cca3

    Raises:
        FileNotFoundError: If payload_dir is not a directory
    """
    if not Path(payload_dir).is_dir():
        raise FileNotFoundError(f"Payload directory not found: {payload_dir}")

    countries = countries or {}
    skip_set = {s.upper() for s in skip}
    only = only.upper() if only else None

    entries: List[Dict[str, Any]] = []
    for path in sorted(Path(payload_dir).glob("*.json")):
        cca3 = path.stem.upper()
        meta = countries.get(cca3, {})
        cca2 = meta.get("cca2")
        if only:
            if only not in (cca3, str(cca2 or "").upper()):
                continue
        elif cca3 in skip_set:
            continue

        name = meta.get("name") or cca3
        if isinstance(name, dict):
            # world-countries style {"common": ..., "official": ...}
            name = name.get("common") or cca3
        try:
            with open(path, "r", encoding="utf-8") as f:
                payload = json.load(f)
            entries.append(build_entry(payload, name, cca3, cca2=cca2))
        except (json.JSONDecodeError, AdvisoryPayloadError) as e:
            logger.warning(f"Bad payload {path.name}: {e}")
            entries.append({"country": name, "cca3": cca3, "error": str(e)})

    logger.info(f"Built {len(entries)} entr{'y' if len(entries) == 1 else 'ies'} from {payload_dir}")
    return build_dataset(entries)
