"""Summary of a classified dataset: color distribution and remaining gaps."""

from typing import Any, Dict, List

from . import categories
from .categories import Color
from .models import EntryDataset

FACT_KEYS = ("visaRequired", "visaFreeDays", "eAuthorizationRequired", "vaccinesRequired")


def summarize_dataset(document: Dict[str, Any]) -> Dict[str, Any]:
    dataset = EntryDataset.from_dict(document)

    by_color: Dict[str, int] = {c.value: 0 for c in Color}
    by_color["unknown"] = 0
    unknown_facts: Dict[str, int] = {k: 0 for k in FACT_KEYS}
    unclassified: List[str] = []

    for record in dataset.results:
        if record.color is None:
            by_color["unknown"] += 1
            unclassified.append(record.cca3)
        else:
            by_color[record.color.value] += 1

        for key, value in record.extracted.to_dict().items():
            if value is None:
                unknown_facts[key] += 1

    return {
        "generated_at": dataset.generated_at,
        "total": dataset.total,
        "by_color": by_color,
        "unknown_facts": unknown_facts,
        "unclassified": sorted(unclassified),
    }


def format_summary(summary: Dict[str, Any]) -> str:
    lines = [
        "Entry Requirements Status",
        "=" * 40,
        f"Generated at:     {summary['generated_at'] or 'n/a'}",
        f"Total countries:  {summary['total']}",
        "",
        "By Color:",
    ]
    for key, count in summary["by_color"].items():
        color = Color.parse(key)
        lines.append(f"  {key:<8} {count:>4}  {categories.swatch(color)}  {categories.label(color)}")

    lines.append("")
    lines.append("Unknown facts:")
    for key, count in summary["unknown_facts"].items():
        lines.append(f"  {key:<24} {count:>4}")

    if summary["unclassified"]:
        lines.append("")
        lines.append("Unclassified: " + ", ".join(summary["unclassified"]))

    return "\n".join(lines)
