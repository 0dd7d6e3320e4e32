"""Structural rules for the sections/questions tree shared by templates and forms.

A structure may arrive under either of two keys, ``sections`` or ``structure``.
``extract_sections`` resolves that once; everything else works on the plain
list of sections it returns.
"""

from collections.abc import Mapping
from typing import Any, NamedTuple

QUESTION_TYPES = ("rating", "text", "multiple_choice", "yes_no")


class StructureValidation(NamedTuple):
    is_valid: bool
    errors: list[str]


def extract_sections(form: Mapping[str, Any] | None) -> list[Any]:
    """Return the sections list of ``form``, or ``[]`` if it has none.

    ``sections`` wins when present and not None, otherwise ``structure`` is
    used. A ``structure`` that is itself a mapping with a ``sections`` key is
    unwrapped.
    """
    if not form:
        return []

    sections = form.get("sections")
    if sections is None:
        sections = form.get("structure")
    if isinstance(sections, Mapping):
        sections = sections.get("sections")
    if not isinstance(sections, list):
        return []
    return sections


def _questions_of(section: Any) -> list[Any] | None:
    if not isinstance(section, Mapping):
        return None
    questions = section.get("questions")
    return questions if isinstance(questions, list) else None


def validate_form_structure(form: Mapping[str, Any] | None) -> StructureValidation:
    """Report every structural defect of ``form`` in one pass.

    Never raises; callers check ``is_valid`` before treating the structure as
    usable.
    """
    errors: list[str] = []
    sections = extract_sections(form)

    if not sections:
        errors.append("Form must have at least one section")

    for s_index, section in enumerate(sections, start=1):
        questions = _questions_of(section)
        if not questions:
            errors.append(f"Section {s_index} must have at least one question")
            continue

        for q_index, question in enumerate(questions, start=1):
            if not isinstance(question, Mapping):
                question = {}
            text = question.get("text")
            if not isinstance(text, str) or not text.strip():
                errors.append(f"Question {q_index} in section {s_index} must have text")
            q_type = question.get("type")
            if q_type not in QUESTION_TYPES:
                errors.append(f"Question {q_index} in section {s_index} has invalid type: {q_type}")

    return StructureValidation(is_valid=not errors, errors=errors)


def count_total_questions(form: Mapping[str, Any] | None) -> int:
    """Sum of question-list lengths across all sections; 0 for no structure."""
    return sum(len(_questions_of(section) or []) for section in extract_sections(form))


def count_sections(form: Mapping[str, Any] | None) -> int:
    return len(extract_sections(form))


def question_key(section_number: int, question_number: int) -> str:
    """Answer key for a question by 1-based position, e.g. ``s1q2``."""
    return f"s{section_number}q{question_number}"


def iter_questions(sections: list[Any]):
    """Yield ``(key, question)`` pairs for every question, in order."""
    for s_index, section in enumerate(sections, start=1):
        for q_index, question in enumerate(_questions_of(section) or [], start=1):
            if isinstance(question, Mapping):
                yield question_key(s_index, q_index), question
