"""Tests for structure validation and question counting."""

import pytest

from squad_feedback.services.structure import (
    count_sections,
    count_total_questions,
    extract_sections,
    iter_questions,
    validate_form_structure,
)


def _section(title="S1", n=1, q_type="rating"):
    return {"title": title, "questions": [{"type": q_type, "text": f"Q{i}"} for i in range(n)]}


# ---------------------------------------------------------------------------
# extract_sections
# ---------------------------------------------------------------------------


class TestExtractSections:
    def test_sections_key(self):
        assert extract_sections({"sections": [_section()]}) == [_section()]

    def test_structure_key(self):
        assert extract_sections({"structure": [_section()]}) == [_section()]

    def test_sections_wins_over_structure(self):
        form = {"sections": [_section("A")], "structure": [_section("B"), _section("C")]}
        assert [s["title"] for s in extract_sections(form)] == ["A"]

    def test_none_sections_falls_back_to_structure(self):
        form = {"sections": None, "structure": [_section("B")]}
        assert [s["title"] for s in extract_sections(form)] == ["B"]

    def test_nested_structure_mapping_unwrapped(self):
        form = {"structure": {"sections": [_section("Nested")]}}
        assert [s["title"] for s in extract_sections(form)] == ["Nested"]

    @pytest.mark.parametrize("form", [None, {}, {"structure": "nope"}, {"sections": 3}])
    def test_missing_or_malformed(self, form):
        assert extract_sections(form) == []


# ---------------------------------------------------------------------------
# validate_form_structure
# ---------------------------------------------------------------------------


class TestValidateFormStructure:
    def test_valid_single_question(self):
        form = {
            "sections": [
                {
                    "title": "Performance",
                    "questions": [{"type": "rating", "text": "How did you play?", "scale": 10}],
                }
            ]
        }
        result = validate_form_structure(form)
        assert result.is_valid is True
        assert result.errors == []

    def test_all_question_types_valid(self):
        form = {
            "structure": [
                {
                    "title": "Everything",
                    "questions": [
                        {"type": "rating", "text": "Rate", "scale": 5},
                        {"type": "text", "text": "Explain"},
                        {"type": "multiple_choice", "text": "Pick", "options": ["A", "B"]},
                        {"type": "yes_no", "text": "Agree?"},
                    ],
                }
            ]
        }
        assert validate_form_structure(form) == (True, [])

    @pytest.mark.parametrize("form", [{}, {"sections": []}, {"structure": []}, None])
    def test_no_sections(self, form):
        result = validate_form_structure(form)
        assert result.is_valid is False
        assert result.errors == ["Form must have at least one section"]

    def test_invalid_type(self):
        form = {"sections": [{"title": "S1", "questions": [{"type": "bogus", "text": "Q"}]}]}
        result = validate_form_structure(form)
        assert result.is_valid is False
        assert result.errors == ["Question 1 in section 1 has invalid type: bogus"]

    def test_empty_section(self):
        result = validate_form_structure({"sections": [{"title": "S1", "questions": []}]})
        assert "Section 1 must have at least one question" in result.errors

    def test_section_without_questions_key(self):
        result = validate_form_structure({"sections": [{"title": "S1"}]})
        assert result.errors == ["Section 1 must have at least one question"]

    def test_blank_text_after_trim(self):
        form = {"sections": [_section(), {"title": "S2", "questions": [{"type": "text", "text": "   "}]}]}
        result = validate_form_structure(form)
        assert result.errors == ["Question 1 in section 2 must have text"]

    def test_collects_every_defect_in_order(self):
        form = {
            "sections": [
                {"title": "S1", "questions": []},
                {
                    "title": "S2",
                    "questions": [
                        {"type": "rating", "text": "ok"},
                        {"type": "slider", "text": ""},
                    ],
                },
            ]
        }
        result = validate_form_structure(form)
        assert result.is_valid is False
        assert result.errors == [
            "Section 1 must have at least one question",
            "Question 2 in section 2 must have text",
            "Question 2 in section 2 has invalid type: slider",
        ]

    def test_non_mapping_question_reported(self):
        result = validate_form_structure({"sections": [{"title": "S1", "questions": ["oops"]}]})
        assert result.errors == [
            "Question 1 in section 1 must have text",
            "Question 1 in section 1 has invalid type: None",
        ]

    def test_does_not_mutate_input(self):
        form = {"sections": [{"title": "S1", "questions": [{"type": "bogus", "text": " "}]}]}
        snapshot = repr(form)
        validate_form_structure(form)
        assert repr(form) == snapshot


# ---------------------------------------------------------------------------
# count_total_questions / count_sections
# ---------------------------------------------------------------------------


class TestCounting:
    def test_counts_across_sections(self):
        form = {"sections": [_section(n=4), _section(n=3), _section(n=5)]}
        assert count_total_questions(form) == 12
        assert count_sections(form) == 3

    def test_structure_key(self):
        assert count_total_questions({"structure": [_section(n=2)]}) == 2

    def test_no_sections_field(self):
        assert count_total_questions({"name": "empty"}) == 0
        assert count_sections({"name": "empty"}) == 0

    def test_section_without_questions_counts_zero(self):
        assert count_total_questions({"sections": [{"title": "x"}, _section(n=2)]}) == 2

    @pytest.mark.parametrize(
        "a, b",
        [
            ([], []),
            ([_section(n=1)], [_section(n=2), _section(n=3)]),
            ([{"title": "no questions"}], [_section(n=7)]),
        ],
    )
    def test_additive(self, a, b):
        assert count_total_questions({"sections": a + b}) == (
            count_total_questions({"sections": a}) + count_total_questions({"sections": b})
        )


class TestIterQuestions:
    def test_keys_are_one_based_positions(self):
        sections = [_section(n=2), _section(n=1)]
        assert [key for key, _ in iter_questions(sections)] == ["s1q1", "s1q2", "s2q1"]
