"""
Unit tests for intent field extractors.

Tests core extraction in irl.contexts.parsing.intent_parser.
"""

import pytest

from irl.contexts.parsing.intent_components import OutputExpectation
from irl.contexts.parsing.intent_parser import (
    ASSUMPTION_GENERAL_AUDIENCE,
    ASSUMPTION_MEDIUM_LENGTH,
    ASSUMPTION_NO_DOMAIN,
    ParsedIntentData,
    extract_audience,
    extract_domain,
    extract_hard_constraints,
    extract_output_expectations,
    extract_primary_goal,
    extract_soft_constraints,
    extract_task_type,
    generate_assumptions,
    parse_intent_text,
)


@pytest.mark.unit
class TestExtractPrimaryGoal:
    """Tests for extract_primary_goal function."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("I want you to write a poem. Make it rhyme.", "Write a poem"),
            ("I want to learn Rust", "Learn Rust"),
            ("please summarize this article!", "Summarize this article"),
            ("Can you explain recursion?", "Explain recursion"),
            ("help me fix this bug", "Fix this bug"),
            ("I need you to migrate my database", "Migrate my database"),
        ],
    )
    def test_strips_filler_prefix(self, text, expected):
        assert extract_primary_goal(text) == expected

    def test_only_first_matching_prefix_removed(self):
        """'please' wins over 'can you', so the second filler stays."""
        assert extract_primary_goal("Please can you write a haiku") == "Can you write a haiku"

    def test_no_sentence_boundary_uses_whole_input(self):
        assert extract_primary_goal("  write unit tests for the parser  ") == "Write unit tests for the parser"

    def test_first_sentence_only(self):
        assert extract_primary_goal("Draft an email! Keep it polite? Thanks.") == "Draft an email"

    def test_empty_input(self):
        assert extract_primary_goal("") == ""

    def test_whitespace_and_punctuation_only(self):
        assert extract_primary_goal("   ") == ""
        assert extract_primary_goal("...") == "..."


@pytest.mark.unit
class TestExtractTaskType:
    """Tests for task type classification."""

    def test_generate(self):
        assert extract_task_type("Write a cover letter") == "generate"

    def test_priority_order_breaks_ties(self):
        """generate is listed before summarize."""
        assert extract_task_type("Write a brief overview of the project") == "generate"
        assert extract_task_type("Explain and fix the failing test") == "explain"

    def test_multi_word_trigger(self):
        assert extract_task_type("Break down the algorithm step by step") == "explain"

    def test_case_insensitive(self):
        assert extract_task_type("REFACTOR this module") == "optimize"

    def test_whole_words_only(self):
        assert extract_task_type("Rewriting history") is None

    def test_no_trigger(self):
        assert extract_task_type("Hello there") is None


@pytest.mark.unit
class TestExtractAudienceAndDomain:
    """Tests for audience and domain tables."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("A tutorial for beginners", "beginners"),
            ("Notes for advanced users", "experts"),
            ("Docs for engineers", "developers"),
            ("A memo for executives", "managers"),
            ("A style guide for designers", "designers"),
            ("Exercises for students", "students"),
            ("FAQ for customers", "end users"),
            ("A pitch for founders", "startup founders"),
            ("A story for kids", "children"),
            ("A talk aimed at a technical audience", "technical audience"),
            ("A summary for non-technical stakeholders", "non-technical audience"),
        ],
    )
    def test_audience_table(self, text, expected):
        assert extract_audience(text) == expected

    def test_audience_first_pattern_wins(self):
        assert extract_audience("A guide for developers and for beginners") == "beginners"

    def test_audience_requires_for(self):
        assert extract_audience("Developers will read this") is None

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Build a React website", "web development"),
            ("Ship an Android release", "mobile development"),
            ("Design the database schema", "backend development"),
            ("Train a machine learning model", "machine learning"),
            ("Set up CI/CD for the repo", "devops"),
            ("Improve our SEO", "marketing"),
            ("Explain bond trading", "finance"),
            ("Summarize medical records", "healthcare"),
            ("Plan an ecommerce launch", "e-commerce"),
            ("Ideas for teaching fractions", "education"),
        ],
    )
    def test_domain_table(self, text, expected):
        assert extract_domain(text) == expected

    def test_domain_first_pattern_wins(self):
        assert extract_domain("Document the web API") == "web development"

    def test_no_domain(self):
        assert extract_domain("Write a story about a dragon") is None


@pytest.mark.unit
class TestExtractConstraints:
    """Tests for hard and soft constraint extraction."""

    def test_must_clause(self):
        constraints = extract_hard_constraints("The report must cite three sources.")
        assert [c.text for c in constraints] == ["cite three sources"]
        assert all(c.type == "hard" for c in constraints)

    def test_must_be_prefix_dropped(self):
        assert [c.text for c in extract_hard_constraints("It must be fast")] == ["fast"]

    def test_all_matches_collected(self):
        text = "You must cite sources. You must use APA style."
        assert [c.text for c in extract_hard_constraints(text)] == ["cite sources", "use APA style"]

    def test_no_and_without_keep_trigger_word(self):
        text = "Use no jargon, and work without external libraries."
        texts = [c.text for c in extract_hard_constraints(text)]
        assert "no jargon" in texts
        assert "without external libraries" in texts

    def test_clause_stops_at_comma(self):
        text = "It needs to compile, ideally on the first try"
        assert [c.text for c in extract_hard_constraints(text)] == ["compile"]
        assert [c.text for c in extract_soft_constraints(text)] == ["on the first try"]

    def test_case_insensitive_dedup(self):
        text = "It must use Python. It MUST USE PYTHON."
        assert [c.text for c in extract_hard_constraints(text)] == ["use Python"]

    def test_no_cross_list_dedup(self):
        text = "It must be typed. It should be typed."
        assert [c.text for c in extract_hard_constraints(text)] == ["typed"]
        assert [c.text for c in extract_soft_constraints(text)] == ["typed"]

    def test_length_bounds(self):
        assert extract_hard_constraints("It must be ok.") == []
        assert [c.text for c in extract_hard_constraints("It must be okay.")] == ["okay"]
        assert len(extract_hard_constraints("It must be " + "a" * 99 + ".")) == 1
        assert extract_hard_constraints("It must be " + "a" * 100 + ".") == []

    def test_soft_triggers(self):
        text = (
            "Preferably use tables. It would be nice to add charts. "
            "If possible, link the sources. Optionally add a glossary."
        )
        texts = [c.text for c in extract_soft_constraints(text)]
        assert texts == ["use tables", "add charts", "link the sources", "add a glossary"]
        assert all(c.type == "soft" for c in extract_soft_constraints(text))

    def test_no_constraints(self):
        assert extract_hard_constraints("Tell me a joke") == []
        assert extract_soft_constraints("Tell me a joke") == []


@pytest.mark.unit
class TestExtractOutputExpectations:
    """Tests for length, format and structure hints."""

    def test_none_when_no_signal(self):
        assert extract_output_expectations("Tell me a joke") is None

    def test_length_and_format(self):
        result = extract_output_expectations("Give me a brief JSON payload")
        assert result == OutputExpectation(length="short", format="JSON", structure=None)

    def test_length_order_short_before_long(self):
        assert extract_output_expectations("A short yet detailed note").length == "short"

    def test_length_defaults_to_any(self):
        result = extract_output_expectations("Write a report with sections")
        assert result.length == "any"
        assert result.format is None
        assert result.structure == ("sections",)

    def test_format_first_match_wins(self):
        assert extract_output_expectations("A markdown table").format == "Markdown"

    def test_all_structure_hints_collected(self):
        result = extract_output_expectations("Include diagrams, include code samples.")
        assert result.structure == ("diagrams", "code samples")
        assert result.format == "code"

    def test_include_stops_at_and(self):
        result = extract_output_expectations("Please include tests and docs")
        assert result.structure == ("tests",)

    def test_long_markdown_with_chapters(self):
        result = extract_output_expectations("Write a long essay in markdown with chapters")
        assert result == OutputExpectation(length="long", format="Markdown", structure=("chapters",))


@pytest.mark.unit
class TestGenerateAssumptions:
    """Tests for assumption notes."""

    def test_all_fields_missing(self):
        parsed = ParsedIntentData(raw_text="Hello", primary_goal="Hello")
        assert generate_assumptions(parsed) == [
            ASSUMPTION_GENERAL_AUDIENCE,
            ASSUMPTION_MEDIUM_LENGTH,
            ASSUMPTION_NO_DOMAIN,
        ]

    def test_nothing_missing(self):
        parsed = ParsedIntentData(
            raw_text="",
            primary_goal="",
            audience="developers",
            domain="devops",
            output_expectations=OutputExpectation(length="any", format="JSON"),
        )
        assert generate_assumptions(parsed) == []

    def test_unset_length_counts_as_missing(self):
        parsed = ParsedIntentData(
            raw_text="",
            primary_goal="",
            audience="developers",
            domain="devops",
            output_expectations=OutputExpectation(length=None, format="JSON"),
        )
        assert generate_assumptions(parsed) == [ASSUMPTION_MEDIUM_LENGTH]

    def test_parse_fills_assumptions(self):
        parsed = parse_intent_text("Write a backend API guide for developers")
        assert parsed.assumptions == [ASSUMPTION_MEDIUM_LENGTH]
