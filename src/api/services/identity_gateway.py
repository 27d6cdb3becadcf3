"""
Identity Gateway - account creation/lookup at the provider plus the local user mirror.
"""
from typing import Any, Dict, Optional

import structlog

from ..identity import IdentityProvider

logger = structlog.get_logger()


class IdentityGateway:
    """
    Pairs the identity provider with the ``users`` collection.

    The mirror document is ``{uid, email}``; callers get ``{id, email}``.
    Provider failures propagate as ProviderError.
    """

    def __init__(self, provider: IdentityProvider, users):
        self.provider = provider
        self.users = users

    async def signup(self, email: Optional[str], password: Optional[str]) -> Dict[str, Any]:
        """Create the provider account, then its local mirror"""
        account = await self.provider.create_account(email, password)

        await self.users.insert_one({"uid": account.uid, "email": account.email})
        logger.info("User registered", uid=account.uid)

        return {"id": account.uid, "email": account.email}

    async def login(self, email: Optional[str], password: Optional[str]) -> Optional[Dict[str, Any]]:
        """
        Resolve a user by email.

        The password is not checked against the provider: only the account's
        existence is looked up. Returns None when no local mirror exists.
        """
        account = await self.provider.get_account_by_email(email)

        user = await self.users.find_one({"uid": account.uid})
        if user is None:
            return None

        logger.info("User logged in", uid=account.uid)
        return {"id": user["uid"], "email": user.get("email")}
