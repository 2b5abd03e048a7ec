# app/application/dtos/user_dto.py

"""
Schemas for user data.

This module defines DTOs (Data Transfer Objects) for validating and
serializing data related to users: signup, login and the token
returned by a successful login.
"""

from typing import Optional
from app.application.dtos.base_dto import CustomBaseModel
from app.shared.utils.input_validation import InputValidator
from pydantic import (
    field_validator,
    EmailStr,
    constr,
    Field,
)


class UserBase(CustomBaseModel):
    """
    Schema base for user data.

    Contains the attributes common to all user DTOs.
    """
    username: constr(min_length=3, max_length=50) = Field(
        ...,
        description="Unique username used to log in.",
    )

    @field_validator('username')
    def validate_username_chars(cls, v):
        """
        Validates the characters of the username.

        Raises:
            ValueError: If the username contains forbidden characters
        """
        is_valid, error_msg = InputValidator.validate_username(v)
        if not is_valid:
            raise ValueError(error_msg)
        return v


class UserCreate(UserBase):
    """
    Schema for creating a new user.

    Extends UserBase and adds the password and an optional email.
    """
    password: str = Field(
        ..., description="User's password, with a minimum of 6 characters and at most 72 bytes."
    )
    email: Optional[EmailStr] = Field(
        None, description="Optional contact email."
    )

    @field_validator('password')
    def validate_password_security(cls, v):
        """
        Validates the password length limits.

        Raises:
            ValueError: If the password doesn't meet requirements
        """
        is_valid, errors = InputValidator.validate_password(v)
        if not is_valid:
            raise ValueError("; ".join(errors))
        return v


class UserLogin(CustomBaseModel):
    """
    Schema for user login.

    Used for user authentication via username and password. Both fields
    are checked by the login use case so a missing one gets the
    "username and password are required" answer.
    """
    username: Optional[str] = Field(None, description="Registered username.")
    password: Optional[str] = Field(None, description="User's password used for authentication.")


class SignupOutput(CustomBaseModel):
    """Returned by a successful signup."""
    message: str
    user_id: int = Field(..., serialization_alias="userId")


class TokenData(CustomBaseModel):
    """
    Schema for authentication token data.
    """
    token: str = Field(..., description="JWT session token (send as 'Authorization: Bearer <token>').")


class MessageOutput(CustomBaseModel):
    message: str
