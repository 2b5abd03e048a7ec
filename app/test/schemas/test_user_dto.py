# app/test/schemas/test_user_dto.py

# Rodar Script
# pytest app/test/schemas/test_user_dto.py

import pytest
from pydantic import ValidationError
from app.application.dtos.user_dto import (
    SignupOutput,
    TokenData,
    UserCreate,
    UserLogin,
)


def test_user_create_valid():
    user = UserCreate(username="ana", password="secret1")
    assert user.username == "ana"
    assert user.password == "secret1"
    assert user.email is None


def test_user_create_keeps_password_whitespace():
    user = UserCreate(username="ana", password="  secret1 ")
    assert user.password == "  secret1 "


def test_user_create_invalid_email():
    with pytest.raises(ValidationError):
        UserCreate(username="ana", password="secret1", email="invalidemail")


@pytest.mark.parametrize("password", ["", "12345", "x" * 73])
def test_user_create_invalid_password(password):
    with pytest.raises(ValidationError):
        UserCreate(username="ana", password=password)


@pytest.mark.parametrize("username", ["ab", "ana maria", "ana;drop", "a" * 51])
def test_user_create_invalid_username(username):
    with pytest.raises(ValidationError):
        UserCreate(username=username, password="secret1")


def test_user_login_fields_optional():
    login = UserLogin()
    assert login.username is None and login.password is None


def test_signup_output_uses_user_id_alias():
    output = SignupOutput(message="ok", user_id=3)
    assert output.model_dump(by_alias=True) == {"message": "ok", "userId": 3}


def test_token_data():
    assert TokenData(token="abc").token == "abc"
