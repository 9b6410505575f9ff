# dashboard/auth.py
"""
Credentials sign-in provider.

Errors raised here form a small taxonomy: every failure the provider knows
about is an AuthError carrying a `type` string, and callers decide which
categories deserve their own message. Anything that is not an AuthError is a
bug and is left to propagate.
"""

import logging
from typing import Any, Mapping

import bcrypt
from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from dashboard.db.schema import users
from dashboard.models.auth import LoginForm
from dashboard.models.forms import parse_form

logger = logging.getLogger(__name__)

CREDENTIALS_PROVIDER = "credentials"


class AuthError(Exception):
    type = "AuthError"


class CredentialsSignin(AuthError):
    """Email/password pair did not match a user."""

    type = "CredentialsSignin"


class CallbackRouteError(AuthError):
    """The provider failed while checking the credentials."""

    type = "CallbackRouteError"


class InvalidProvider(AuthError):
    type = "InvalidProvider"


def hash_password(plain: str) -> str:
    """Hash a plain-text password with bcrypt."""
    return bcrypt.hashpw(plain.encode(), bcrypt.gensalt()).decode()


def verify_password(plain: str, hashed: str) -> bool:
    """Verify a plain-text password against a bcrypt hash."""
    return bcrypt.checkpw(plain.encode(), hashed.encode())


def get_user(engine: Engine, email: str):
    with engine.connect() as conn:
        stmt = select(users).where(users.c.email == email)
        return conn.execute(stmt).mappings().first()


def sign_in(provider: str, form: Mapping[str, Any], *, engine: Engine):
    """
    Check the submitted credentials and return the matching user row.

    Raises CredentialsSignin for a malformed form, an unknown email or a wrong
    password, and CallbackRouteError when the user lookup itself fails.
    """
    if provider != CREDENTIALS_PROVIDER:
        raise InvalidProvider(f"Unknown sign-in provider {provider!r}")

    try:
        credentials = parse_form(LoginForm, form)
    except ValidationError:
        raise CredentialsSignin("Malformed credentials")

    try:
        user = get_user(engine, credentials.email)
    except SQLAlchemyError as exc:
        logger.exception("Failed to fetch user %s", credentials.email)
        raise CallbackRouteError("Failed to fetch user") from exc

    if user is None or not verify_password(credentials.password, user["password"]):
        logger.info("Rejected sign-in for %s", credentials.email)
        raise CredentialsSignin("Invalid credentials")

    logger.info("User %s signed in", user["id"])
    return user
