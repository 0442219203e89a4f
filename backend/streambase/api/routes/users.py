"""User Routes: create and list.

Invariants:
    - Only POST and GET on the collection are exposed; read, update, and delete
      by id exist on UserService but are not routed
"""

from fastapi import APIRouter, Depends, status

from streambase.api.dependencies import get_user_service
from streambase.schemas.user import UserCreate, UserResponse
from streambase.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate, service: UserService = Depends(get_user_service),
):
    return await service.create(body)


@router.get("", response_model=list[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    """List all users, newest first."""
    return await service.list_all()
