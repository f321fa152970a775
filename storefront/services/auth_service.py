# storefront/services/auth_service.py
"""Weryfikacja tokenow Supabase i sprawdzanie roli admina."""

from typing import Protocol
from uuid import UUID

from authlib.jose import JoseError, JsonWebToken
from sqlalchemy.orm import Session

from storefront.domain.errors import Unauthorized
from storefront.repos.user_role_repo import UserRoleRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

ADMIN_ROLE = "admin"

#tylko HS256 - wspolny sekret z dostawca tozsamosci
_jwt = JsonWebToken(["HS256"])


def verify_token(token: str, secret: str) -> UUID:
    """
    Zwraca user id (claim `sub`) z poprawnie podpisanego, waznego tokenu.
    Nie sprawdzamy iss/aud - tokeny Supabase nie maja standardowych wartosci.
    """
    if not secret:
        raise Unauthorized("JWT secret not configured")
    if not token:
        raise Unauthorized("User ID not found in token")

    try:
        claims = _jwt.decode(token, secret)
        claims.validate(leeway=0)
    except (JoseError, ValueError) as e:
        logger.info(f"Rejected token: {e}")
        raise Unauthorized("Invalid or expired token")

    sub = claims.get("sub")
    if not sub:
        raise Unauthorized("User ID not found in token")
    try:
        return UUID(str(sub))
    except ValueError:
        raise Unauthorized("User ID not found in token")


class RoleResolver(Protocol):
    def get_role(self, user_id: UUID) -> str | None: ...


class DbRoleResolver:
    """Rola z tabeli user_roles. Odczyt przy kazdym requescie, bez cache."""

    def __init__(self, db: Session):
        self.repo = UserRoleRepo(db)

    def get_role(self, user_id: UUID) -> str | None:
        row = self.repo.get_role(user_id)
        return row.role if row else None


def is_admin(resolver: RoleResolver, user_id: UUID) -> bool:
    #fail closed - brak wiersza, inna rola albo blad odczytu = brak uprawnien
    try:
        role = resolver.get_role(user_id)
    except Exception as e:
        logger.warning(f"Role lookup for user {user_id} failed: {e}")
        return False

    return bool(role) and role.strip().lower() == ADMIN_ROLE
