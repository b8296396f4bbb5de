"""
Email format checking, backed by the `email-validator` package
(the same engine pydantic's `EmailStr` uses).
"""
from email_validator import EmailNotValidError, validate_email


class EmailValidator:
    def is_valid(self, email: str) -> bool:
        if not isinstance(email, str):
            return False
        try:
            # syntax only – no DNS lookups on the login path
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True
