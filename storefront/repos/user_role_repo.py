# storefront/repos/user_role_repo.py
from uuid import UUID

from sqlalchemy import select

from storefront.data.models.user_role import UserRoleModel
from storefront.repos.base import BaseRepo


class UserRoleRepo(BaseRepo):
    def get_role(self, user_id: UUID) -> UserRoleModel | None:
        return self.db.execute(
            select(UserRoleModel).where(UserRoleModel.user_id == user_id).limit(1)
        ).scalar_one_or_none()

    def add_role(self, role: UserRoleModel) -> UserRoleModel:
        self.db.add(role)
        self.db.commit()
        self.db.refresh(role)
        return role
