from fastapi import APIRouter, Depends

from squad_feedback.api.errors import guard
from squad_feedback.schemas.users import UserResponse
from squad_feedback.services.gateway import Gateway, get_gateway

router = APIRouter()


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: str, gateway: Gateway = Depends(get_gateway)):
    with guard("Failed to fetch user"):
        return gateway.get_by_id("users", user_id)
