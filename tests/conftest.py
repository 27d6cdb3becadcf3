"""
Pytest Fixtures for Finance Tracker API Tests
"""
import os
import uuid
from copy import deepcopy
from types import SimpleNamespace
from typing import AsyncGenerator, Dict

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import AsyncClient, ASGITransport
from pymongo import ReturnDocument

# Set test environment
os.environ["ENVIRONMENT"] = "testing"
os.environ.setdefault("MONGODB_URL", "mongodb://mongo:27017")
os.environ.setdefault("MONGODB_DATABASE", "finance_tracker_test")

from src.api.main import app
from src.api.database import get_db
from src.api.identity import ProviderAccount, ProviderError, get_identity_provider


# =============================================================================
# In-memory doubles
# =============================================================================

def _matches(document: Dict, query: Dict) -> bool:
    return all(document.get(key) == value for key, value in query.items())


class FakeCursor:
    def __init__(self, documents):
        self._documents = documents

    async def to_list(self, length=None):
        return self._documents if length is None else self._documents[:length]


class FakeCollection:
    """Subset of the async collection API used by the application"""

    def __init__(self, name: str):
        self.name = name
        self.documents: list = []

    async def insert_one(self, document):
        document.setdefault("_id", ObjectId())
        self.documents.append(deepcopy(document))
        return SimpleNamespace(inserted_id=document["_id"])

    def find(self, query):
        return FakeCursor([deepcopy(d) for d in self.documents if _matches(d, query)])

    async def find_one(self, query):
        for document in self.documents:
            if _matches(document, query):
                return deepcopy(document)
        return None

    async def find_one_and_update(self, query, update, return_document=None):
        for document in self.documents:
            if _matches(document, query):
                before = deepcopy(document)
                document.update(update.get("$set", {}))
                if return_document is ReturnDocument.AFTER:
                    return deepcopy(document)
                return before
        return None

    async def delete_one(self, query):
        before = len(self.documents)
        self.documents = [d for d in self.documents if not _matches(d, query)]
        return SimpleNamespace(deleted_count=before - len(self.documents))


class FakeDatabase:
    def __init__(self):
        self.collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]


class FakeIdentityProvider:
    """Accounts kept in memory; mirrors the provider's rejections by message"""

    def __init__(self):
        self.accounts: Dict[str, ProviderAccount] = {}

    async def create_account(self, email, password):
        if not email or "@" not in email:
            raise ProviderError(f'Malformed email address string: "{email}".')
        if not password or len(password) < 6:
            raise ProviderError("Invalid password string. Password must be a string at least 6 characters long.")
        if email in self.accounts:
            raise ProviderError("The user with the provided email already exists (EMAIL_EXISTS).")
        account = ProviderAccount(uid=uuid.uuid4().hex, email=email)
        self.accounts[email] = account
        return account

    async def get_account_by_email(self, email):
        if email not in self.accounts:
            raise ProviderError(f"No user record found for the provided email: {email}.")
        return self.accounts[email]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def identity_provider() -> FakeIdentityProvider:
    return FakeIdentityProvider()


@pytest_asyncio.fixture(scope="function")
async def client(fake_db, identity_provider) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API tests"""
    app.dependency_overrides[get_db] = lambda: fake_db
    app.dependency_overrides[get_identity_provider] = lambda: identity_provider

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def sample_expense_data():
    """Sample expense data"""
    return {
        "userId": "u1",
        "dateBought": "2024-01-01",
        "itemBought": "Coffee",
        "amount": 4.5,
        "note": "Morning coffee"
    }


@pytest.fixture
def sample_income_data():
    """Sample income data"""
    return {
        "userId": "u1",
        "dateReceived": "2024-01-31",
        "amountReceived": 2500,
        "note": "January salary"
    }
