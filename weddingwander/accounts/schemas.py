from pydantic import BaseModel, Field, model_validator

EMAIL_PATTERN = r"(?i)^[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}$"


class Account(BaseModel):
    id: str
    name: str
    email: str
    password: str


class AccountResponse(BaseModel):
    id: str
    name: str
    email: str


class SignupRequest(BaseModel):
    name: str = Field(min_length=2)
    email: str = Field(pattern=EMAIL_PATTERN)
    password: str = Field(min_length=6)
    confirm_password: str | None = None

    @model_validator(mode="after")
    def _passwords_match(self) -> "SignupRequest":
        if self.confirm_password is not None and self.confirm_password != self.password:
            raise ValueError("Passwords do not match")
        return self


class LoginRequest(BaseModel):
    email: str = Field(pattern=EMAIL_PATTERN)
    password: str = Field(min_length=1)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    account: AccountResponse
