import re

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, field_validator

# Caractères "spéciaux" acceptés dans un mot de passe
PASSWORD_SYMBOLS = "$&+,:;=?@#|'<>.^*()%!-"

_PASSWORD_RULES = (
    (re.compile(r"[0-9]"), "Password must contain at least one digit"),
    (re.compile(r"[A-Z]"), "Password must contain at least one uppercase character"),
    (re.compile("[" + re.escape(PASSWORD_SYMBOLS) + "]"), "Password must contain at least one special character"),
)

# ---------- Inputs ----------

class SignUpIn(BaseModel):
    email: str = Field(min_length=3, max_length=100, examples=["alice@example.com"])
    name: str = Field(min_length=3, max_length=100, examples=["Alice"])
    password: str = Field(min_length=6, max_length=100, examples=["Abc123!"])

    @field_validator("email")
    @classmethod
    def _email_format(cls, value: str) -> str:
        # On valide le format mais on conserve l'email tel que saisi
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(str(e))
        return value

    @field_validator("password")
    @classmethod
    def _password_strength(cls, value: str) -> str:
        for pattern, message in _PASSWORD_RULES:
            if not pattern.search(value):
                raise ValueError(message)
        return value

class SignInIn(BaseModel):
    email: str
    password: str


# ---------- Outputs ----------

class MessageOut(BaseModel):
    message: str

class TokenOut(BaseModel):
    token: str
