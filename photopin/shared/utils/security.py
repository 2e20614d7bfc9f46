"""
Security Utilities

Password hashing and JWT token management.

Password Hashing:
=================
CredentialService wraps a passlib bcrypt context. The work factor comes from
settings.BCRYPT_ROUNDS; services receive an instance through their
constructor so tests can swap it.

JWT Tokens:
===========
Uses PyJWT for JSON Web Token creation and validation.

Usage:
======
    from photopin.shared.utils.security import CredentialService, SecurityUtils

    credentials = CredentialService()
    digest = credentials.hash("password123")
    if credentials.verify("password123", digest):
        print("Password matches!")

    token = SecurityUtils.create_access_token(
        data={"user_id": "123"},
        secret_key="secret",
        expires_delta=timedelta(hours=1)
    )
    payload = SecurityUtils.decode_access_token(token, "secret")
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from passlib.context import CryptContext

from photopin.config.settings import settings


class CredentialService:
    """
    One-way hash and verify of a plaintext secret.

    Attributes:
        context: passlib CryptContext configured for bcrypt
    """

    def __init__(self, rounds: Optional[int] = None) -> None:
        self.context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds or settings.BCRYPT_ROUNDS,
        )

    def hash(self, plaintext: str) -> str:
        """
        Hash a secret using bcrypt.

        Args:
            plaintext: Plain text password

        Returns:
            Bcrypt hash string (includes salt)
        """
        return self.context.hash(plaintext)

    def verify(self, plaintext: str, digest: str) -> bool:
        """
        Verify a secret against a bcrypt hash.

        Returns:
            True if the secret matches, False otherwise
        """
        return self.context.verify(plaintext, digest)


class SecurityUtils:
    """JWT token creation and validation."""

    @staticmethod
    def create_access_token(
        data: dict,
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        """
        Create JWT access token.

        Args:
            data: Payload data to encode (e.g., user_id)
            secret_key: Secret key for signing
            expires_delta: Token expiration time (default: 7 days)
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Encoded JWT token string
        """
        to_encode = data.copy()

        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(days=7))

        to_encode.update({
            "exp": expire,
            "iat": now,
        })

        return jwt.encode(to_encode, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict:
        """
        Decode and verify JWT token.

        Raises:
            ValueError: If token is expired or invalid
        """
        try:
            return jwt.decode(
                token,
                secret_key,
                algorithms=[algorithm],
            )
        except jwt.ExpiredSignatureError:
            raise ValueError("Token has expired")
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {str(e)}")
