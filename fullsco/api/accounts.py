"""Session auth routes and admin user management."""

import logging

from fastapi import APIRouter, Depends, Request

from fullsco.api.crud import mount_crud
from fullsco.api.deps import SESSION_USER_KEY, require_admin, require_user, service_dependency
from fullsco.db.models import User, UserRole
from fullsco.errors import AuthenticationError
from fullsco.schemas.accounts import LoginRequest, RegisterRequest, UserResponse
from fullsco.schemas.common import Envelope, ok
from fullsco.services.users import UsersService

logger = logging.getLogger(__name__)

get_users = service_dependency(UsersService)

# --- Auth ---

auth_router = APIRouter()


@auth_router.post("/login", response_model=Envelope[UserResponse])
async def login(data: LoginRequest, request: Request, service: UsersService = Depends(get_users)):
    user = await service.login(data.username, data.password)
    if user is None:
        raise AuthenticationError("Invalid username or password")
    request.session[SESSION_USER_KEY] = user.id
    logger.info(f"User #{user.id} logged in")
    return ok(UserResponse.model_validate(user), "Logged in")


@auth_router.post("/logout", response_model=Envelope[None])
async def logout(request: Request):
    request.session.clear()
    return ok(message="Logged out")


@auth_router.get("/user", response_model=Envelope[UserResponse])
async def get_current_user(user: User = Depends(require_user)):
    return ok(UserResponse.model_validate(user))


@auth_router.post("/register", response_model=Envelope[UserResponse], status_code=201)
async def register(data: RegisterRequest, request: Request, service: UsersService = Depends(get_users)):
    user = await service.register(data)
    request.session[SESSION_USER_KEY] = user.id
    return ok(UserResponse.model_validate(user), "Account created")


# --- Users (admin) ---


def user_filters(role: UserRole | None = None) -> dict:
    return {"role": role}


users_router = mount_crud(
    APIRouter(),
    UsersService,
    response_model=UserResponse,
    list_filters=user_filters,
    read_guard=require_admin,
)
