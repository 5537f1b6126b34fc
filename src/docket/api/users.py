from fastapi import APIRouter, Body, Depends, status

from docket.api.deps import get_context
from docket.schemas import (
    MessageResponse,
    UserCreate,
    UserListResponse,
    UserOut,
    UserResponse,
    UserUpdate,
)
from docket.services import ServiceContext
from docket.services import users as user_service

router = APIRouter(prefix="/users", tags=["users"])

@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserCreate = Body(default_factory=UserCreate),
    ctx: ServiceContext = Depends(get_context),
):
    """Create a new user"""
    user = await user_service.create_user(ctx, payload)
    return UserResponse(message="User created successfully.", user=UserOut.model_validate(user))

@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    payload: UserUpdate = Body(default_factory=UserUpdate),
    ctx: ServiceContext = Depends(get_context),
):
    """Update user fields"""
    user = await user_service.update_user(ctx, user_id, payload)
    return UserResponse(message="User updated successfully.", user=UserOut.model_validate(user))

@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: str,
    ctx: ServiceContext = Depends(get_context),
):
    """Delete user"""
    await user_service.delete_user(ctx, user_id)
    return MessageResponse(message="User deleted successfully.")

@router.get("", response_model=UserListResponse)
async def list_users(ctx: ServiceContext = Depends(get_context)):
    """List all users"""
    users = await user_service.list_users(ctx)
    message = "Users retrieved successfully." if users else "No users found."
    return UserListResponse(message=message, users=[UserOut.model_validate(u) for u in users])

@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    ctx: ServiceContext = Depends(get_context),
):
    """Get user details"""
    user = await user_service.get_user(ctx, user_id)
    return UserResponse(message="User retrieved successfully.", user=UserOut.model_validate(user))
