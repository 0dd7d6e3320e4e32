"""Template storage: JSON structure plus normalized section/question rows.

Templates keep their full sections array in ``templates.structure``.
Templates created through this module are also written to ``template_sections``
and ``template_questions`` so individual questions can be referenced by id.
"""

import copy
import logging
from typing import Any

from squad_feedback.core.exceptions import StructureValidationError
from squad_feedback.models import Template
from squad_feedback.services.catalog import CatalogTemplate
from squad_feedback.services.gateway import Gateway
from squad_feedback.services.structure import validate_form_structure

logger = logging.getLogger(__name__)


def create_template(gateway: Gateway, values: dict[str, Any]) -> Template:
    """Validate and store a template with its normalized rows.

    Raises ``StructureValidationError`` without writing anything when the
    sections tree is invalid.
    """
    sections = values.get("sections") or []
    result = validate_form_structure({"sections": sections})
    if not result.is_valid:
        raise StructureValidationError(result.errors)

    template = gateway.insert(
        "templates",
        {
            "name": values["name"],
            "description": values.get("description"),
            "type": values["type"],
            "estimated_time": values.get("estimated_time"),
            "icon": values.get("icon"),
            "structure": copy.deepcopy(sections),
        },
    )
    _store_sections(gateway, template, sections)
    logger.info("Created template %s (%s) with %d sections", template.id, template.name, len(sections))
    return template


def _store_sections(gateway: Gateway, template: Template, sections: list[dict[str, Any]]) -> None:
    for s_index, section in enumerate(sections):
        section_row = gateway.insert(
            "template_sections",
            {"template_id": template.id, "title": section.get("title", ""), "order_index": s_index},
        )
        gateway.insert_many(
            "template_questions",
            [
                {
                    "section_id": section_row.id,
                    "question_text": question["text"],
                    "question_type": question["type"],
                    "options": question.get("options"),
                    "scale": question.get("scale"),
                    "required": question.get("required", True),
                    "order_index": q_index,
                }
                for q_index, question in enumerate(section["questions"])
            ],
        )


def seed_catalog_template(gateway: Gateway, entry: CatalogTemplate) -> Template:
    """Store a default catalog entry as a template row."""
    return create_template(
        gateway,
        {
            "name": entry.name,
            "description": entry.description,
            "type": entry.type,
            "estimated_time": entry.estimated_time,
            "icon": entry.icon,
            "sections": entry.structure,
        },
    )


def get_template_sections(gateway: Gateway, template: Template) -> list[dict[str, Any]]:
    """Sections of ``template`` from the normalized rows, ordered by position.

    Templates stored without normalized rows fall back to their JSON
    structure.
    """
    rows = gateway.list_by("template_sections", {"template_id": template.id}, order_by="order_index")
    if not rows:
        return copy.deepcopy(template.structure or [])

    sections = []
    for row in rows:
        questions = gateway.list_by("template_questions", {"section_id": row.id}, order_by="order_index")
        sections.append(
            {
                "id": str(row.id),
                "title": row.title,
                "questions": [_question_dict(q) for q in questions],
            }
        )
    return sections


def _question_dict(row) -> dict[str, Any]:
    question: dict[str, Any] = {"id": str(row.id), "type": row.question_type, "text": row.question_text}
    if row.scale is not None:
        question["scale"] = row.scale
    if row.options is not None:
        question["options"] = row.options
    question["required"] = row.required
    return question
