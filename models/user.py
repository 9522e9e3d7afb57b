from sqlalchemy import Column, Integer, String, Index
from models.base import Base, TimestampMixin


class User(TimestampMixin, Base):
    """
    Application user.

    The password column only ever holds a passlib hash; UserRepository
    hashes on every write.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)

    full_name = Column(String(255), nullable=False)
    username = Column(String(100), nullable=False, index=True)
    email = Column(String(255), nullable=False)
    password = Column(String(255), nullable=False)

    company = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)

    __table_args__ = (
        Index("idx_users_email", "email", unique=True),
    )
