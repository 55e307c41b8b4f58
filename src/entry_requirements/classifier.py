"""Decision table mapping entry facts to a map color.

Rules are checked strictly in order; later rules overlap earlier fallthroughs,
so the order must not be rearranged. Returns None when the evidence is
insufficient.
"""

from typing import Optional

from .categories import Color
from .models import ExtractedFacts
from .tristate import TriState


def _by_vaccines(vaccines_required: TriState, if_required: Color, otherwise: Color) -> Color:
    return if_required if vaccines_required is TriState.TRUE else otherwise


def classify(
    visa_required: TriState,
    e_authorization_required: TriState,
    vaccines_required: TriState,
) -> Optional[Color]:
    """Classify a country from its three requirement facts.

    Args:
        visa_required: Whether a visa is needed
        e_authorization_required: Whether an electronic authorization is needed
        vaccines_required: Whether any vaccination is mandatory

    Returns:
        A Color, or None if the facts do not determine one
    """
    # 1. Visa required decides everything else
    if visa_required is TriState.TRUE:
        return _by_vaccines(vaccines_required, Color.PURPLE, Color.RED)

    # 2. Visa-free
    if visa_required is TriState.FALSE:
        if e_authorization_required is TriState.TRUE:
            return _by_vaccines(vaccines_required, Color.YELLOW, Color.BLUE)
        if vaccines_required is not TriState.TRUE:
            return Color.GREEN
        # vaccines required without e-authorization: fall through

    # 3. E-authorization with unknown visa (or the fallthrough above)
    if e_authorization_required is TriState.TRUE:
        return _by_vaccines(vaccines_required, Color.YELLOW, Color.BLUE)

    # 4. Only the health fact is known and it is clean
    if (
        visa_required is TriState.UNKNOWN
        and e_authorization_required is TriState.UNKNOWN
        and vaccines_required is TriState.FALSE
    ):
        return Color.GREEN

    return None


def classify_facts(facts: ExtractedFacts) -> Optional[Color]:
    return classify(
        facts.visa_required,
        facts.e_authorization_required,
        facts.vaccines_required,
    )
