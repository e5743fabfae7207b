from pydantic import BaseModel, EmailStr, Field
from pydantic.alias_generators import to_camel

# Shared config: camelCase on the wire, snake_case in Python
class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True

# Schema for user and admin registration requests
class SignupRequest(CamelModel):
    email: EmailStr
    password: str
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)

# Schema for sign-in credentials
class SigninRequest(CamelModel):
    email: EmailStr
    password: str

# Token issued on sign-in, with the display name the client shows
class SigninResponse(CamelModel):
    token: str
    first_name: str
    last_name: str

class MessageResponse(BaseModel):
    message: str

# Route-guard answer for a token that passed verification
class ValidateResponse(BaseModel):
    valid: bool = True
