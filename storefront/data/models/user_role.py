# storefront/data/models/user_role.py
import uuid

from sqlalchemy import Column, String, DateTime, Uuid

from storefront.data.database import Base
from storefront.data.models._time import utcnow


class UserRoleModel(Base):
    __tablename__ = "user_roles"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, nullable=False, index=True)
    role = Column(String, nullable=False, default="customer")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
