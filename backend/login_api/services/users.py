"""
User persistence used by the login flow:
• LoadUserByEmailRepository    – email → UserRecord | None
• UpdateAccessTokenRepository  – store the issued token on the user doc

Documents look like `{_id, email, password, access_token}` where
`password` is the bcrypt hash. Above this module the id is always the
string `UserRecord.id`.
"""

from typing import Any, Optional

from bson import ObjectId

from ..core.errors import MissingParamError
from ..models.user import UserRecord


def _to_object_id(user_id: str) -> Any:
    return ObjectId(user_id) if ObjectId.is_valid(user_id) else user_id


class LoadUserByEmailRepository:
    def __init__(self, user_model=None) -> None:
        self.user_model = user_model

    async def load(self, email: Optional[str] = None) -> Optional[UserRecord]:
        if not email:
            raise MissingParamError("email")
        if self.user_model is None:
            raise MissingParamError("users_collection")
        doc = await self.user_model.find_one({"email": email}, projection={"password": 1})
        if not doc:
            return None
        return UserRecord(id=str(doc["_id"]), hashed_password=doc["password"])


class UpdateAccessTokenRepository:
    def __init__(self, user_model=None) -> None:
        self.user_model = user_model

    async def update(self, user_id: Optional[str] = None, access_token: Optional[str] = None) -> None:
        if self.user_model is None:
            raise MissingParamError("users_collection")
        if not user_id:
            raise MissingParamError("user_id")
        if not access_token:
            raise MissingParamError("access_token")
        await self.user_model.update_one(
            {"_id": _to_object_id(user_id)},
            {"$set": {"access_token": access_token}},
        )
