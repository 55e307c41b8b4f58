"""
Classification pass over an entry-requirements document.

For each record:
1. Read trusted facts from ``extracted`` (true/false only; null means unset)
2. Infer facts from ``visaText`` / ``healthText``
3. Reconcile (trusted wins, else inferred, else unknown)
4. Classify into a color

Records are independent, so the pass can run on a thread pool without any
change in output. Inputs are never mutated.
"""

import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional

from .classifier import classify_facts
from .extractor import extract_facts
from .models import ExtractedFacts, parse_days
from .tristate import prefer

logger = logging.getLogger(__name__)


def reconcile(trusted: Optional[Dict[str, Any]], inferred: ExtractedFacts) -> ExtractedFacts:
    """Merge the raw ``extracted`` mapping with inferred facts.

    Inference only fills facts that are null or missing. A present value is
    never overwritten, even when it is not a valid boolean or day count.
    """
    trusted = trusted if isinstance(trusted, dict) else {}
    raw_days = trusted.get("visaFreeDays")
    return ExtractedFacts(
        visa_required=prefer(trusted.get("visaRequired"), inferred.visa_required),
        visa_free_days=inferred.visa_free_days if raw_days is None else parse_days(raw_days),
        e_authorization_required=prefer(trusted.get("eAuthorizationRequired"), inferred.e_authorization_required),
        vaccines_required=prefer(trusted.get("vaccinesRequired"), inferred.vaccines_required),
    )


def process_entry(entry: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of entry with ``extracted`` and ``color`` filled in."""
    trusted = entry.get("extracted")
    inferred = extract_facts(entry.get("visaText"), entry.get("healthText"))
    facts = reconcile(trusted, inferred)
    color = classify_facts(facts)

    extracted = dict(trusted) if isinstance(trusted, dict) else {}
    raw_days = extracted.get("visaFreeDays")
    extracted.update(facts.to_dict())
    if raw_days is not None:
        # display-only; carried through as supplied
        extracted["visaFreeDays"] = raw_days

    return {
        **entry,
        "extracted": extracted,
        "color": color.value if color else None,
    }


def classify_results(results: List[Dict[str, Any]], workers: int = 1) -> List[Dict[str, Any]]:
    """Classify a list of records, preserving order."""
    if workers <= 1 or len(results) < 2:
        return [process_entry(r) for r in results]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(process_entry, results))


def classify_dataset(document: Dict[str, Any], workers: int = 1) -> Dict[str, Any]:
    """Classify every record in an interchange document.

    Args:
        document: Parsed document with ``generatedAt``, ``total``, ``results``
        workers: Thread pool size; 1 runs sequentially

    Returns:
        New document with classified results and ``total`` set to the record count
    """
    results = classify_results(document.get("results") or [], workers=workers)

    counts = Counter(r["color"] or "unknown" for r in results)
    for r in results:
        if r["color"] is None:
            logger.debug(f"Unclassified: {r.get('cca3')} ({r.get('country')})")
    logger.info(
        f"Classified {len(results)} record(s): "
        + ", ".join(f"{k}={v}" for k, v in sorted(counts.items()))
    )

    return {**document, "total": len(results), "results": results}
