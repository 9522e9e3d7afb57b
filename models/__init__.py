"""
SQLAlchemy ORM models for database tables.

Models:
    base: Base declarative class and the shared timestamp columns
    user: Application users (hashed password, optional company/phone)
    auth_token: Issued bearer tokens, one row per login/refresh
    notebook: Bookkeeping rows for files processed by notebook runs
    organization: Organizations

Usage:
    from models import Base, User, AuthToken, Notebook, Organization

Example:
    org = Organization(name="Acme", email="ops@acme.test")
    session.add(org)
    await session.commit()

Relationships:
    - AuthToken → User (many-to-one, no cascade on delete)
"""

from models.base import Base
from models.user import User
from models.auth_token import AuthToken
from models.notebook import Notebook
from models.organization import Organization

__all__ = [
    "Base",
    "User",
    "AuthToken",
    "Notebook",
    "Organization",
]
