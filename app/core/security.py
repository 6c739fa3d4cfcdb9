"""Security utilities: password hashing and bearer token issue/verify."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.models.user import Role, User

_pwd = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

REQUIRED_CLAIMS = ("sub", "username", "email", "role")


class InvalidToken(Exception):
    """Token failed signature or structural validation."""


@dataclass(frozen=True)
class TokenClaims:
    """Identity snapshot embedded in a token at issuance time."""

    user_id: UUID
    username: str
    email: str
    role: str


def get_password_hash(password: str) -> str:
    if not password:
        raise ValueError("password_blank")
    return _pwd.hash(password)


def verify_password(password: str, password_hash: Optional[str]) -> bool:
    if not password or not password_hash:
        return False
    try:
        return _pwd.verify(password, password_hash)
    except ValueError:
        # Unrecognised or corrupt hash
        return False


def issue_token(
    user: User,
    *,
    secret: str,
    algorithm: str = "HS256",
    expires_minutes: Optional[int] = None,
) -> str:
    """Create a signed token carrying id, username, email and role."""
    if not secret:
        raise ValueError("jwt_secret_blank")

    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user.id),
        "username": user.username,
        "email": user.email,
        "role": user.role,
        "iat": int(now.timestamp()),
    }
    if expires_minutes:
        payload["exp"] = int((now + timedelta(minutes=expires_minutes)).timestamp())
    return jwt.encode(payload, secret, algorithm=algorithm)


def verify_token(token: str, *, secret: str, algorithm: str = "HS256") -> TokenClaims:
    """Check signature and structure only; never consults the database."""
    if not token:
        raise InvalidToken("token_blank")
    try:
        payload = jwt.decode(token, secret, algorithms=[algorithm])
    except JWTError as e:
        raise InvalidToken(str(e)) from e

    missing = [claim for claim in REQUIRED_CLAIMS if not payload.get(claim)]
    if missing:
        raise InvalidToken(f"missing claims: {', '.join(missing)}")

    try:
        user_id = UUID(str(payload["sub"]))
    except ValueError as e:
        raise InvalidToken("malformed subject") from e

    role = payload["role"]
    if role not in {r.value for r in Role}:
        raise InvalidToken("unknown role")

    return TokenClaims(
        user_id=user_id,
        username=payload["username"],
        email=payload["email"],
        role=role,
    )
