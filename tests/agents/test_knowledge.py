"""
Tests for the coffee knowledge lookup.

Matching is first-match over ordered tables, so these tests pin exact
entries for representative profiles.
"""

import pytest

from coffee_backend.agents.sommelier import knowledge
from coffee_backend.agents.sommelier.knowledge import (
    DEFAULT_KNOWLEDGE,
    KnowledgeEntry,
    lookup,
)

QUERY = "flavor profile brewing method roast level origin"


def _context(language, framework, ide, vibe):
    return f"{language} {framework} {ide} {vibe} developer preferences"


class TestLanguageMatching:
    """Language found in the context decides the trait phrase."""

    def test_node_maps_to_creative_entry(self):
        entry = lookup(QUERY, _context("Node.js", "Express.js", "VS Code", "elegantly-simple"))
        assert entry.suggestions[0] == "Ethiopian Yirgacheffe"

    def test_java_maps_to_enterprise_entry(self):
        entry = lookup(QUERY, _context("Java", "Spring Boot", "JetBrains", "elegantly-simple"))
        assert entry.suggestions == ("French Roast", "Italian Dark Blend", "Espresso Roast")

    def test_python_elegant_vibe_maps_to_pour_over(self):
        entry = lookup(QUERY, _context("Python", "Flask", "VS Code", "elegantly-simple"))
        assert entry.suggestions[0] == "Japanese Pour-Over"

    def test_context_word_can_win_before_trait_words(self):
        """'performance' in the vibe matches the third entry before 'elegant' traits do."""
        entry = lookup(QUERY, _context("Python", "Django", "VS Code", "performance-obsessed"))
        assert entry.suggestions[0] == "Cold Brew Concentrate"

    def test_go_matches_efficient_before_performance(self):
        """Go traits contain 'efficient', which the second entry claims first."""
        entry = lookup(QUERY, _context("Go", "Gin", "VS Code", "cutting-edge-explorer"))
        assert entry.suggestions[0] == "Brazilian Santos"

    def test_language_match_is_case_insensitive(self):
        entry = lookup(QUERY, "NODE.JS fastify zed data-driven")
        assert entry.suggestions[0] == "Ethiopian Yirgacheffe"

    def test_first_language_in_table_order_wins(self):
        """Both Java and Node.js appear; Node.js is declared first."""
        entry = lookup(QUERY, "java and node.js")
        assert entry.suggestions[0] == "Ethiopian Yirgacheffe"


class TestQueryKeywordMatching:
    """Without a language in context the query keywords decide."""

    @pytest.mark.parametrize("query,expected_first", [
        ("something creative", "Ethiopian Yirgacheffe"),
        ("need SPEED", "Cold Brew Concentrate"),
        ("simple please", "Japanese Pour-Over"),
        ("traditional shop", "French Roast"),
        ("nothing matching", "Brazilian Santos"),
    ])
    def test_query_keywords(self, query, expected_first):
        entry = lookup(query, "")
        assert entry.suggestions[0] == expected_first

    def test_query_ignored_when_language_present(self):
        entry = lookup("speed", "Java Quarkus NeoVim data-driven")
        assert entry.suggestions[0] == "French Roast"


class TestDefaults:

    def test_context_defaults_to_empty(self):
        assert lookup("creative") == lookup("creative", "")

    def test_generic_default_when_no_entry_matches(self, monkeypatch):
        monkeypatch.setattr(knowledge, "DEVELOPER_COFFEE_KNOWLEDGE", ())
        entry = lookup(QUERY, "Go Gin VS Code data-driven")
        assert entry == DEFAULT_KNOWLEDGE
        assert "medium roast" in entry.knowledge
        assert entry.suggestions == ("Colombian Medium Roast", "Brazilian Blend", "Balanced Espresso")


class TestPurity:

    def test_same_input_same_output(self):
        context = _context("Ruby", "Sinatra", "Zed", "creative-problem-solver")
        assert lookup(QUERY, context) == lookup(QUERY, context)

    def test_entries_are_immutable(self):
        entry = lookup(QUERY, "PHP Laravel VS Code data-driven")
        assert isinstance(entry, KnowledgeEntry)
        with pytest.raises(AttributeError):
            entry.knowledge = "changed"  # type: ignore[misc]
