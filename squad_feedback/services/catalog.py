"""Default feedback templates offered to every club."""

import copy
from dataclasses import dataclass, field
from typing import Any

from squad_feedback.services.structure import count_sections, count_total_questions


@dataclass
class CatalogTemplate:
    """A predefined template.

    ``declared_sections`` and ``declared_questions`` are hand-written display
    values and may not match ``structure``; use ``section_count`` and
    ``question_count`` for anything that depends on the real shape.
    """

    id: str
    name: str
    description: str
    type: str
    estimated_time: str
    icon: str
    declared_sections: int
    declared_questions: int
    structure: list[dict[str, Any]] = field(default_factory=list)

    @property
    def section_count(self) -> int:
        return count_sections({"structure": self.structure})

    @property
    def question_count(self) -> int:
        return count_total_questions({"structure": self.structure})


_DEFAULT_TEMPLATES: list[dict[str, Any]] = [
    {
        "id": "post_match_standard",
        "name": "Post-Match Standard Review",
        "description": "Performance, tactics, and team dynamics",
        "type": "post_game",
        "declared_sections": 3,
        "declared_questions": 12,
        "estimated_time": "5-7 min",
        "icon": "⚽",
        "structure": [
            {
                "title": "Performance Assessment",
                "questions": [
                    {"type": "rating", "text": "How would you rate your individual performance today?", "scale": 10},
                    {"type": "rating", "text": "How would you rate the team's overall performance?", "scale": 10},
                    {"type": "text", "text": "What was your strongest contribution to the team today?"},
                    {"type": "text", "text": "What area would you most like to improve for next match?"},
                ],
            },
            {
                "title": "Tactical Analysis",
                "questions": [
                    {"type": "rating", "text": "How well did we execute our game plan?", "scale": 10},
                    {
                        "type": "multiple_choice",
                        "text": "Which tactical area needs most improvement?",
                        "options": ["Defensive Shape", "Attack Transition", "Set Pieces", "Possession Play"],
                    },
                    {"type": "text", "text": "Any tactical suggestions for future matches?"},
                ],
            },
            {
                "title": "Team Dynamics",
                "questions": [
                    {"type": "rating", "text": "How would you rate team communication today?", "scale": 10},
                    {"type": "rating", "text": "How positive was the team atmosphere?", "scale": 10},
                    {"type": "text", "text": "Any feedback for the coaching staff?"},
                    {"type": "yes_no", "text": "Do you feel your voice is heard in team decisions?"},
                    {"type": "text", "text": "Additional comments (optional)"},
                ],
            },
        ],
    },
    {
        "id": "training_session",
        "name": "Training Session Review",
        "description": "Drills, fitness, and skill development",
        "type": "post_training",
        "declared_sections": 4,
        "declared_questions": 15,
        "estimated_time": "6-8 min",
        "icon": "🏃",
        "structure": [
            {
                "title": "Session Quality",
                "questions": [
                    {"type": "rating", "text": "How would you rate today's training session?", "scale": 10},
                    {"type": "rating", "text": "How challenging was the session for your skill level?", "scale": 10},
                    {"type": "text", "text": "Which drill or activity was most beneficial?"},
                ],
            },
        ],
    },
    {
        "id": "development_review",
        "name": "Player Development Review",
        "description": "Personal growth and goal setting",
        "type": "development",
        "declared_sections": 3,
        "declared_questions": 10,
        "estimated_time": "8-10 min",
        "icon": "📈",
        "structure": [
            {
                "title": "Self Assessment",
                "questions": [
                    {"type": "rating", "text": "How would you rate your progress this season?", "scale": 10},
                    {"type": "text", "text": "What are you most proud of in your development?"},
                ],
            },
        ],
    },
]


def get_default_templates() -> list[CatalogTemplate]:
    """Return fresh copies of the default catalog, in display order."""
    return [CatalogTemplate(**copy.deepcopy(entry)) for entry in _DEFAULT_TEMPLATES]


def get_default_template(template_id: str) -> CatalogTemplate | None:
    for template in get_default_templates():
        if template.id == template_id:
            return template
    return None
