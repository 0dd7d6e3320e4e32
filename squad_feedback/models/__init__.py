from squad_feedback.models.event import Event
from squad_feedback.models.form import Form
from squad_feedback.models.response import QuestionResponse, Response
from squad_feedback.models.template import Template, TemplateQuestion, TemplateSection
from squad_feedback.models.user import User

__all__ = [
    "Event",
    "Form",
    "QuestionResponse",
    "Response",
    "Template",
    "TemplateQuestion",
    "TemplateSection",
    "User",
]
