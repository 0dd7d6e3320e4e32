"""Analytics service: preview summaries and aggregates over stored responses."""

import logging
import math
import random
from collections import defaultdict
from collections.abc import Sequence
from typing import Any

from squad_feedback.core.config import settings
from squad_feedback.models import Form, Response
from squad_feedback.services.structure import count_sections, count_total_questions, extract_sections, iter_questions

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Preview analytics
# ---------------------------------------------------------------------------

PREVIEW_INSIGHTS = [
    "Team communication rated highly (8.2/10 average)",
    "Defensive shape identified as area for improvement",
    "75% of players feel their voice is heard in team decisions",
    "Suggested focus: Set piece execution and fitness levels",
]

PREVIEW_QUESTIONS = [
    ("Individual Performance", 7.8),
    ("Team Performance", 8.1),
    ("Communication", 8.2),
]


def generate_mock_analytics(rng: random.Random | None = None, roster_size: int | None = None) -> dict[str, Any]:
    """Build a synthetic results summary for the dashboard preview.

    Values are random within fixed ranges and are not derived from stored
    responses. Pass a seeded ``rng`` for reproducible output.
    """
    rng = rng or random.Random()
    roster_size = roster_size or settings.MOCK_ROSTER_SIZE

    total_responses = rng.randint(15, 34)
    anonymous_responses = math.floor(total_responses * (0.3 + rng.random() * 0.5))
    avg_rating = 6.5 + rng.random() * 3

    return {
        "totalResponses": total_responses,
        "anonymousResponses": anonymous_responses,
        "responseRate": math.floor(total_responses / roster_size * 100),
        "avgPerformanceRating": f"{avg_rating:.1f}",
        "insights": list(PREVIEW_INSIGHTS),
        "questionAnalysis": [
            {"question": label, "avgRating": rating, "responseCount": total_responses}
            for label, rating in PREVIEW_QUESTIONS
        ],
    }


# ---------------------------------------------------------------------------
# Form response analytics
# ---------------------------------------------------------------------------


def summarize_form_responses(
    form: Form,
    responses: Sequence[Response],
    roster_size: int | None = None,
) -> dict[str, Any]:
    """Aggregate stored responses for one form."""
    roster_size = roster_size or settings.ROSTER_SIZE
    total = len(responses)
    structure = {"structure": form.structure}

    completion_times = [r.completion_time_seconds or 0 for r in responses]
    ratings: dict[str, list[float]] = defaultdict(list)
    for response in responses:
        for answer in response.question_responses:
            if answer.answer_numeric is not None:
                ratings[answer.question_id].append(answer.answer_numeric)

    question_analysis = []
    for key, question in iter_questions(extract_sections(structure)):
        if question.get("type") != "rating":
            continue
        values = ratings.get(key, [])
        question_analysis.append(
            {
                "questionId": key,
                "question": question.get("text", ""),
                "avgRating": round(sum(values) / len(values), 1) if values else None,
                "responseCount": len(values),
            }
        )

    logger.debug("Summarized %d responses for form %s", total, form.id)
    return {
        "formId": str(form.id),
        "formName": form.name,
        "totalResponses": total,
        "anonymousResponses": sum(1 for r in responses if r.is_anonymous),
        "responseRate": round(total / roster_size * 100) if total else 0,
        "averageCompletionTime": round(sum(completion_times) / total) if total else 0,
        "sectionCount": count_sections(structure),
        "questionCount": count_total_questions(structure),
        "questionAnalysis": question_analysis,
    }
