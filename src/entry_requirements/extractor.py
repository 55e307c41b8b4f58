"""Rule-based fact inference over Italian advisory text.

Each fact is an ordered tuple of rules. The first rule whose pattern matches
decides the verdict; if none match, the fact stays UNKNOWN. Empty or missing
text never matches anything.

All inference functions return None / UNKNOWN when input is empty -- no fabrication.
"""

import re
from dataclasses import dataclass
from typing import Optional, Sequence

from .models import ExtractedFacts
from .tristate import TriState


@dataclass(frozen=True)
class TextRule:
    name: str
    pattern: "re.Pattern[str]"
    verdict: TriState

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def _rule(name: str, pattern: str, verdict: TriState) -> TextRule:
    return TextRule(name, re.compile(pattern, re.IGNORECASE), verdict)


VISA_RULES = (
    _rule("visa_not_needed", r"\b(?:non|no) (?:è|e'|e) (?:necessario|richiesto) il visto", TriState.FALSE),
    _rule("without_visa", r"senza visto", TriState.FALSE),
    _rule("visa_mentioned", r"\bvisto\b", TriState.TRUE),
)

E_AUTHORIZATION_RULES = (
    _rule("esta", r"\besta\b", TriState.TRUE),
    _rule("eta", r"\beta\b", TriState.TRUE),
    _rule("e_visa", r"e-?visa", TriState.TRUE),
    _rule("electronic_authorization", r"autorizzazione elettronica", TriState.TRUE),
    _rule("valid_electronically", r"valid[io] elettronic", TriState.TRUE),
)

# Negative rules come first: "non obbligatorie" also contains "obbligatorie".
VACCINE_RULES = (
    _rule("none", r"nessuna", TriState.FALSE),
    _rule("not_mandatory", r"non obbligatori[ae]?", TriState.FALSE),
    _rule("mandatory", r"obbligatori[ae]?", TriState.TRUE),
    _rule("required", r"required", TriState.TRUE),
)

VISA_FREE_DAYS_PATTERN = re.compile(r"(\d{1,3})\s*(?:giorni|g)\b", re.IGNORECASE)


def first_match(rules: Sequence[TextRule], text: Optional[str]) -> Optional[TextRule]:
    """Return the first rule matching text, or None."""
    if not text:
        return None
    for rule in rules:
        if rule.matches(text):
            return rule
    return None


def apply_rules(rules: Sequence[TextRule], text: Optional[str]) -> TriState:
    rule = first_match(rules, text)
    return rule.verdict if rule else TriState.UNKNOWN


def infer_visa_required(text: Optional[str]) -> TriState:
    return apply_rules(VISA_RULES, text)


def infer_visa_free_days(text: Optional[str]) -> Optional[int]:
    """First 1-3 digit number directly followed by 'giorni' or 'g'."""
    if not text:
        return None
    match = VISA_FREE_DAYS_PATTERN.search(text)
    if match:
        return int(match.group(1))
    return None


def infer_e_authorization(text: Optional[str]) -> TriState:
    """TRUE when an e-authorization scheme is named.

    Never FALSE: prose that does not mention one says nothing about whether
    one is needed.
    """
    return apply_rules(E_AUTHORIZATION_RULES, text)


def infer_vaccines_required(text: Optional[str]) -> TriState:
    return apply_rules(VACCINE_RULES, text)


def extract_facts(visa_text: Optional[str], health_text: Optional[str]) -> ExtractedFacts:
    """Infer all four facts from the raw visa and health snippets."""
    return ExtractedFacts(
        visa_required=infer_visa_required(visa_text),
        visa_free_days=infer_visa_free_days(visa_text),
        e_authorization_required=infer_e_authorization(visa_text),
        vaccines_required=infer_vaccines_required(health_text),
    )
