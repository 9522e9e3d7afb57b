from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import relationship
from models.base import Base, TimestampMixin


class AuthToken(TimestampMixin, Base):
    """
    An issued bearer token.

    Created on login and refresh, deleted on logout. Rows are not removed
    when their user is deleted and expired rows are never swept, so
    `user_id` carries no database-level foreign key.
    """
    __tablename__ = "auth_tokens"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)
    token = Column(Text, nullable=False)

    user = relationship(
        "User",
        primaryjoin="foreign(AuthToken.user_id) == User.id",
        viewonly=True,
    )
