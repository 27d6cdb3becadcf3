"""
Identity Provider - Firebase Authentication behind an async interface.

The Admin SDK is blocking, so every call is pushed to a worker thread.
"""
import asyncio
from dataclasses import dataclass
from typing import Optional

import firebase_admin
from firebase_admin import auth, credentials
from firebase_admin.exceptions import FirebaseError
import structlog

from .config import settings

logger = structlog.get_logger()


class ProviderError(Exception):
    """The identity provider rejected a request"""


@dataclass
class ProviderAccount:
    """Account as known by the identity provider"""
    uid: str
    email: Optional[str] = None


class IdentityProvider:
    """Account creation and lookup at Firebase Authentication"""

    def __init__(self, app: Optional[firebase_admin.App] = None):
        self.app = app

    async def create_account(self, email: Optional[str], password: Optional[str]) -> ProviderAccount:
        try:
            record = await asyncio.to_thread(
                auth.create_user, email=email, password=password, app=self.app
            )
        except (FirebaseError, ValueError) as e:
            # ValueError covers arguments the SDK rejects before calling out
            raise ProviderError(str(e)) from e
        return ProviderAccount(uid=record.uid, email=record.email)

    async def get_account_by_email(self, email: Optional[str]) -> ProviderAccount:
        try:
            record = await asyncio.to_thread(auth.get_user_by_email, email, app=self.app)
        except (FirebaseError, ValueError) as e:
            raise ProviderError(str(e)) from e
        return ProviderAccount(uid=record.uid, email=record.email)


_provider: Optional[IdentityProvider] = None


def init_identity_provider() -> IdentityProvider:
    """Initialize the Firebase app once per process"""
    global _provider
    if _provider is not None:
        return _provider

    if settings.FIREBASE_CREDENTIALS_PATH:
        credential = credentials.Certificate(settings.FIREBASE_CREDENTIALS_PATH)
    else:
        credential = credentials.ApplicationDefault()

    options = {"projectId": settings.FIREBASE_PROJECT_ID} if settings.FIREBASE_PROJECT_ID else None
    app = firebase_admin.initialize_app(credential, options)
    _provider = IdentityProvider(app)

    logger.info("Identity provider initialized", project=app.project_id)
    return _provider


def close_identity_provider() -> None:
    """Release the Firebase app"""
    global _provider
    if _provider is None:
        return
    logger.info("Closing identity provider")
    firebase_admin.delete_app(_provider.app)
    _provider = None


def get_identity_provider() -> IdentityProvider:
    """Dependency for getting the identity provider"""
    if _provider is None:
        raise RuntimeError("Identity provider is not initialized")
    return _provider
