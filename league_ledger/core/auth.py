# auth.py
# Admin password gate for mutating routes. A placeholder check, not a
# security boundary: one shared password, sent in the X-Admin-Password header.

from typing import Optional

from fastapi import Header, HTTPException, Request
from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_admin_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_admin_password(password: Optional[str], password_hash: str) -> bool:
    if not password:
        return False
    return pwd_context.verify(password, password_hash)


def require_admin(request: Request, x_admin_password: Optional[str] = Header(default=None)) -> None:
    """Dependency: reject the request unless the admin password matches."""
    if not verify_admin_password(x_admin_password, request.app.state.admin_password_hash):
        raise HTTPException(status_code=401, detail="Wrong admin password")
