from functools import lru_cache
from pydantic_settings import BaseSettings
from pydantic import Field, MongoDsn
class Settings(BaseSettings):
    mongo_uri: MongoDsn = "mongodb://mongo:27017/login_api"
    users_collection: str = "users"
    token_secret: str = Field(..., min_length=32)
    bcrypt_rounds: int = Field(12, ge=4, le=31)
    host: str = "0.0.0.0"
    port: int = 5858
    log_level: str = "INFO"
    class Config: env_file = ".env"
@lru_cache
def get_settings() -> Settings: return Settings()
