from pydantic import BaseModel, Field

class UserRecord(BaseModel):
    """The slice of a user document the login flow needs."""
    id: str
    hashed_password: str = Field(..., min_length=1)
