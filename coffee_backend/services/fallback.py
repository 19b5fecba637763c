"""
Static fallback recommendations.

Used whenever the sommelier model cannot be reached. One entry per
supported language; the reasoning template receives the framework, IDE
and vibe verbatim. Pure and total: no I/O, no exceptions.
"""

from typing import Dict, NamedTuple

from coffee_backend.schemas.recommendations import PreferenceRequest, RecommendationResult


class FallbackEntry(NamedTuple):
    coffee_name: str
    flavor_profile: str
    reasoning_template: str


FALLBACK_TABLE: Dict[str, FallbackEntry] = {
    "Node.js": FallbackEntry(
        coffee_name="Async Espresso",
        flavor_profile="Bold and efficient with notes of vanilla and a smooth, non-blocking finish",
        reasoning_template=(
            "Like Node.js, this espresso is single-threaded but powerful - it gets things done "
            "fast and efficiently. Your choice of {framework} framework and {ide} IDE suggests "
            "you appreciate streamlined tools, and the {vibe} vibe calls for a coffee that "
            "delivers maximum impact with minimal complexity."
        ),
    ),
    "Python": FallbackEntry(
        coffee_name="Pythonic Colombian",
        flavor_profile="Smooth, well-balanced, and universally beloved with hints of chocolate",
        reasoning_template=(
            "Just like Python, this Colombian coffee is elegant, readable, and gets the job done "
            "beautifully. With {framework} framework and {ide} in your toolkit, plus a {vibe} "
            "approach, you need a coffee that's as versatile and reliable as your favorite language."
        ),
    ),
    "Java": FallbackEntry(
        coffee_name="Enterprise Dark Roast",
        flavor_profile="Robust, full-bodied, and built to last with strong, consistent notes",
        reasoning_template=(
            "Like Java itself, this dark roast is enterprise-grade - robust, reliable, and ready "
            "for any challenge. Your {framework} framework, {ide} setup, and {vibe} philosophy "
            "align perfectly with a coffee that's been proven in production environments worldwide."
        ),
    ),
    "Go": FallbackEntry(
        coffee_name="Concurrent Cold Brew",
        flavor_profile="Clean, efficient, and refreshingly fast with no unnecessary complexity",
        reasoning_template=(
            "Go's simplicity and speed deserve a coffee that matches - this cold brew is "
            "efficient, clean, and gets straight to the point. With {framework} framework, "
            "{ide}, and your {vibe} mindset, you need fuel that performs without the overhead."
        ),
    ),
    "Ruby": FallbackEntry(
        coffee_name="Artisan Pour-Over",
        flavor_profile="Elegant and expressive with carefully crafted flavor notes that make you happy",
        reasoning_template=(
            "Ruby developers appreciate beauty in simplicity, and this pour-over delivers exactly "
            "that. Your {framework} framework, {ide} choice, and {vibe} approach show you value "
            "craftsmanship - this coffee celebrates the same principles of elegant, expressive design."
        ),
    ),
    ".NET": FallbackEntry(
        coffee_name="Structured Macchiato",
        flavor_profile="Layered, well-organized, and enterprise-ready with a perfect balance of components",
        reasoning_template=(
            "Like the .NET ecosystem, this macchiato has structure, layers, and enterprise-grade "
            "reliability. Your {framework} framework, {ide} toolkit, and {vibe} philosophy call "
            "for a coffee that's as well-architected and dependable as your favorite framework."
        ),
    ),
    "PHP": FallbackEntry(
        coffee_name="Classic Americano",
        flavor_profile="Straightforward, reliable, and gets the job done without fanfare",
        reasoning_template=(
            "PHP powers the web quietly and effectively, just like this Americano powers "
            "developers. With {framework} framework, {ide}, and your {vibe} approach, you need "
            "a coffee that's practical, dependable, and ready for anything the internet throws at it."
        ),
    ),
}

GENERIC_FALLBACK = FallbackEntry(
    coffee_name="Developer's Choice Blend",
    flavor_profile="A perfect balance of energy and focus with notes of determination",
    reasoning_template=(
        "Every great developer needs great coffee. Your combination of {language}, {framework}, "
        "{ide}, and {vibe} energy deserves a custom blend designed for peak performance."
    ),
)


def fallback(request: PreferenceRequest) -> RecommendationResult:
    """
    Return the canned recommendation for the request's language.

    Unknown languages get GENERIC_FALLBACK, which mentions all four answers.
    """
    entry = FALLBACK_TABLE.get(request.language, GENERIC_FALLBACK)
    # str.format ignores unused keyword arguments
    reasoning = entry.reasoning_template.format(
        language=request.language,
        framework=request.framework,
        ide=request.ide,
        vibe=request.vibe,
    )
    return RecommendationResult(
        coffee_name=entry.coffee_name,
        flavor_profile=entry.flavor_profile,
        reasoning=reasoning,
    )
