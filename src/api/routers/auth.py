"""
Auth Router - signup and login through the identity provider
"""
from fastapi import APIRouter, Depends, status

from ..dependencies import get_identity_gateway
from ..errors import IDENTITY_ERRORS, error_response, not_found
from ..models import Credentials, UserResponse
from ..services.identity_gateway import IdentityGateway

router = APIRouter()


@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    credentials: Credentials,
    gateway: IdentityGateway = Depends(get_identity_gateway)
):
    """Create a provider account and its local user record"""
    try:
        return await gateway.signup(credentials.email, credentials.password)
    except IDENTITY_ERRORS as e:
        return error_response(e)


@router.post("/login", response_model=UserResponse)
async def login(
    credentials: Credentials,
    gateway: IdentityGateway = Depends(get_identity_gateway)
):
    """Look up a user by email; the password is not verified"""
    try:
        user = await gateway.login(credentials.email, credentials.password)
    except IDENTITY_ERRORS as e:
        return error_response(e)

    if user is None:
        return not_found("User not found")
    return user
