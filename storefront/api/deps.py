# storefront/api/deps.py
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.errors import Forbidden
from storefront.services.auth_service import DbRoleResolver, RoleResolver, is_admin, verify_token
from storefront.utils import settings

_bearer = HTTPBearer(auto_error=False)


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> UUID:
    token = credentials.credentials if credentials else ""
    return verify_token(token, settings.SUPABASE_JWT_SECRET)


def get_role_resolver(db: Session = Depends(get_db)) -> RoleResolver:
    return DbRoleResolver(db)


def require_admin(
    user_id: UUID = Depends(get_current_user_id),
    resolver: RoleResolver = Depends(get_role_resolver),
) -> UUID:
    #sprawdzane przy kazdym requescie, bez zapamietywania roli
    if not is_admin(resolver, user_id):
        raise Forbidden("Admin role required")
    return user_id
