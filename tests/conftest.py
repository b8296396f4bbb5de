import os

os.environ.setdefault("TOKEN_SECRET", "test-secret-key-that-is-at-least-32-chars")
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017/login_api_test")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from typing import Optional

import pytest

from login_api.models.user import UserRecord


class EncrypterSpy:
    def __init__(self) -> None:
        self.is_valid = True
        self.value: Optional[str] = None
        self.hashed_value: Optional[str] = None

    async def compare(self, value, hashed_value):
        self.value = value
        self.hashed_value = hashed_value
        return self.is_valid


class TokenGeneratorSpy:
    def __init__(self) -> None:
        self.access_token: Optional[str] = "any_token"
        self.user_id: Optional[str] = None

    async def generate(self, user_id):
        self.user_id = user_id
        return self.access_token


class LoadUserByEmailRepositorySpy:
    def __init__(self) -> None:
        self.user: Optional[UserRecord] = UserRecord(id="any_id", hashed_password="hashed_password")
        self.email: Optional[str] = None

    async def load(self, email):
        self.email = email
        return self.user


class UpdateAccessTokenRepositorySpy:
    def __init__(self) -> None:
        self.user_id: Optional[str] = None
        self.access_token: Optional[str] = None

    async def update(self, user_id, access_token):
        self.user_id = user_id
        self.access_token = access_token


class AuthUseCaseSpy:
    def __init__(self) -> None:
        self.access_token: Optional[str] = "valid_token"
        self.email: Optional[str] = None
        self.password: Optional[str] = None

    async def auth(self, email, password):
        self.email = email
        self.password = password
        return self.access_token


class EmailValidatorSpy:
    def __init__(self) -> None:
        self.is_email_valid = True
        self.email: Optional[str] = None

    def is_valid(self, email):
        self.email = email
        return self.is_email_valid


class FakeUsersCollection:
    """Just enough of a Motor collection for the user repositories."""

    def __init__(self) -> None:
        self.docs: list[dict] = []

    async def insert_one(self, doc):
        doc = {"_id": f"id_{len(self.docs) + 1}", **doc}
        self.docs.append(doc)
        return doc["_id"]

    async def find_one(self, query, projection=None):
        for doc in self.docs:
            if all(doc.get(k) == v for k, v in query.items()):
                if projection:
                    return {k: v for k, v in doc.items() if k == "_id" or k in projection}
                return dict(doc)
        return None

    async def update_one(self, query, update):
        for doc in self.docs:
            if all(doc.get(k) == v for k, v in query.items()):
                doc.update(update["$set"])
                return


@pytest.fixture
def encrypter():
    return EncrypterSpy()


@pytest.fixture
def token_generator():
    return TokenGeneratorSpy()


@pytest.fixture
def load_user_by_email_repository():
    return LoadUserByEmailRepositorySpy()


@pytest.fixture
def update_access_token_repository():
    return UpdateAccessTokenRepositorySpy()


@pytest.fixture
def auth_use_case():
    return AuthUseCaseSpy()


@pytest.fixture
def email_validator():
    return EmailValidatorSpy()


@pytest.fixture
def users_collection():
    return FakeUsersCollection()
