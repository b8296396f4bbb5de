from typing import Optional
from jose import jwt
from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool
from .errors import MissingParamError
ALGORITHM = "HS256"
class BcryptEncrypter:
    def __init__(self, rounds: int = 12) -> None:
        self.pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)
    def hash(self, value: str) -> str:
        if not value: raise MissingParamError("value")
        return self.pwd_context.hash(value)
    async def compare(self, value: str, hashed_value: str) -> bool:
        if not value: raise MissingParamError("value")
        if not hashed_value: raise MissingParamError("hashed_value")
        # bcrypt is deliberately slow – keep it off the event loop
        return await run_in_threadpool(self.pwd_context.verify, value, hashed_value)
class JwtTokenGenerator:
    def __init__(self, secret: Optional[str] = None) -> None: self.secret = secret
    async def generate(self, user_id: str) -> str:
        if not self.secret: raise MissingParamError("secret")
        if not user_id: raise MissingParamError("user_id")
        return jwt.encode({"sub": user_id}, self.secret, algorithm=ALGORITHM)
