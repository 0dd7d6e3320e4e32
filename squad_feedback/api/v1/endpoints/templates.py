from fastapi import APIRouter, Depends

from squad_feedback.api.errors import guard
from squad_feedback.schemas.templates import (
    CatalogTemplateResponse,
    TemplateCreate,
    TemplateDetailResponse,
    TemplateResponse,
)
from squad_feedback.services.catalog import get_default_templates
from squad_feedback.services.gateway import Gateway, get_gateway
from squad_feedback.services.templates import create_template, get_template_sections

router = APIRouter()


@router.get("/", response_model=list[TemplateResponse])
def list_templates(gateway: Gateway = Depends(get_gateway)):
    with guard("Failed to fetch templates"):
        return gateway.list_by("templates", order_by="created_at", descending=True)


@router.get("/defaults", response_model=list[CatalogTemplateResponse])
def list_default_templates():
    return [CatalogTemplateResponse.model_validate(t) for t in get_default_templates()]


@router.get("/{template_id}", response_model=TemplateDetailResponse)
def get_template(template_id: str, gateway: Gateway = Depends(get_gateway)):
    with guard("Failed to fetch template"):
        template = gateway.get_by_id("templates", template_id)
        detail = TemplateResponse.model_validate(template).model_dump()
        detail["sections"] = get_template_sections(gateway, template)
        return detail


@router.post("/", response_model=TemplateResponse, status_code=201)
def create_template_endpoint(payload: TemplateCreate, gateway: Gateway = Depends(get_gateway)):
    with guard("Failed to create template"):
        values = payload.model_dump(exclude={"sections"})
        values["sections"] = [section.model_dump(exclude_none=True) for section in payload.sections]
        return create_template(gateway, values)
