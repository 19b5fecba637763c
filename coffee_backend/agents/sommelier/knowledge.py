"""
Coffee knowledge lookup.

Maps a developer profile (free-text context) to a paragraph of coffee
knowledge and a short list of suggested coffees. The result is fed into
the sommelier prompt as grounding.

Matching is an ordered linear scan and the first match wins:
1. the first known language found in the context picks the trait phrase;
2. otherwise keywords in the query pick it;
3. the first knowledge entry sharing at least one word with the trait
   phrase (or the context) is returned.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class KnowledgeEntry:
    """Coffee knowledge paragraph plus ordered coffee suggestions."""
    knowledge: str
    suggestions: Tuple[str, ...]


# Order matters: earlier languages win when several appear in the context.
LANGUAGE_TRAITS: Tuple[Tuple[str, str], ...] = (
    ("Node.js", "creative innovative async"),
    ("Python", "elegant simple readable"),
    ("Java", "enterprise traditional robust"),
    ("Go", "performance speed efficient"),
    ("Ruby", "elegant creative expressive"),
    (".NET", "enterprise reliable structured"),
    ("PHP", "practical reliable web-focused"),
)

# (keywords, trait phrase), checked against the query when no language matched
QUERY_KEYWORD_TRAITS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("creative", "innovative"), "creative innovative complex"),
    (("performance", "speed"), "performance speed system"),
    (("elegant", "simple"), "elegant simple clean"),
    (("enterprise", "traditional"), "enterprise traditional robust"),
)
DEFAULT_TRAITS = "reliable practical efficient"

# Order matters: the first entry with any matching word is selected.
DEVELOPER_COFFEE_KNOWLEDGE: Tuple[Tuple[str, KnowledgeEntry], ...] = (
    (
        "creative innovative complex",
        KnowledgeEntry(
            knowledge=(
                "Creative developers often enjoy complex, innovative coffee experiences. "
                "Ethiopian single origins with bright, fruity flavors and wine-like acidity "
                "match their creative problem-solving approach."
            ),
            suggestions=("Ethiopian Yirgacheffe", "Kenyan AA", "Natural Process Single Origin"),
        ),
    ),
    (
        "reliable practical efficient",
        KnowledgeEntry(
            knowledge=(
                "Practical developers prefer reliable, consistent coffee that gets the job done. "
                "Brazilian and Colombian beans offer balanced, no-nonsense flavors with "
                "reliable quality."
            ),
            suggestions=("Brazilian Santos", "Colombian Supremo", "Medium Roast Blend"),
        ),
    ),
    (
        "performance speed system",
        KnowledgeEntry(
            knowledge=(
                "Performance-focused developers need efficient caffeine delivery. Cold brew "
                "and espresso provide quick, concentrated energy without complexity."
            ),
            suggestions=("Cold Brew Concentrate", "Double Espresso", "Nitro Cold Brew"),
        ),
    ),
    (
        "enterprise traditional robust",
        KnowledgeEntry(
            knowledge=(
                "Enterprise developers value stability and proven solutions. Dark roast blends "
                "offer bold, reliable flavors that have stood the test of time."
            ),
            suggestions=("French Roast", "Italian Dark Blend", "Espresso Roast"),
        ),
    ),
    (
        "elegant simple clean",
        KnowledgeEntry(
            knowledge=(
                "Developers who value elegance prefer clean, well-crafted coffee. Pour-over "
                "brewing methods highlight the pure essence of high-quality beans."
            ),
            suggestions=("Japanese Pour-Over", "Light Roast Single Origin", "Chemex Coffee"),
        ),
    ),
    (
        "experimental cutting-edge modern",
        KnowledgeEntry(
            knowledge=(
                "Modern, experimental developers enjoy innovative brewing methods and unique "
                "flavor profiles. Specialty processing and alternative brewing unlock new "
                "experiences."
            ),
            suggestions=("Honey Process Coffee", "AeroPress", "Specialty Fermented Beans"),
        ),
    ),
)

DEFAULT_KNOWLEDGE = KnowledgeEntry(
    knowledge=(
        "A well-balanced coffee that complements focused development work. Consider medium "
        "roast origins that provide consistent energy and pleasant flavors without being "
        "overpowering."
    ),
    suggestions=("Colombian Medium Roast", "Brazilian Blend", "Balanced Espresso"),
)


def _match_traits(query: str, context: str) -> str:
    """Pick the trait phrase for a profile: language in context first, then query keywords."""
    context_lower = context.lower()
    for language, traits in LANGUAGE_TRAITS:
        if language.lower() in context_lower:
            return traits

    query_lower = query.lower()
    for keywords, traits in QUERY_KEYWORD_TRAITS:
        if any(keyword in query_lower for keyword in keywords):
            return traits

    return DEFAULT_TRAITS


def lookup(query: str, context: str = "") -> KnowledgeEntry:
    """
    Return the coffee knowledge matching a developer profile.

    Args:
        query: Keyword hint; only consulted when no language appears in context
        context: Free text containing the language and other quiz answers

    Returns:
        The first matching KnowledgeEntry, or DEFAULT_KNOWLEDGE
    """
    matching_traits = _match_traits(query, context)
    context_lower = context.lower()

    for traits, entry in DEVELOPER_COFFEE_KNOWLEDGE:
        if any(word in matching_traits or word in context_lower for word in traits.split(" ")):
            return entry

    return DEFAULT_KNOWLEDGE
