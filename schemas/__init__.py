"""
Pydantic schemas for request validation and response serialization.

Schemas:
    common: Base model (camelCase aliases, ORM mode) and the error body
    users: User create/update/response and password change
    organizations: Organization create/update/response
    notebooks: Bookkeeping rows and dashboard metrics
    auth: Login, logout and token refresh bodies
    runs: Notebook run trigger, listing and status bodies

Usage:
    from schemas.users import UserCreate, UserResponse
    from schemas.notebooks import DashboardMetrics

Example:
    # Wire names are camelCase, attributes are snake_case
    body = UserUpdate.model_validate({"fullName": "Ada Lovelace"})
    assert body.model_dump(exclude_unset=True) == {"full_name": "Ada Lovelace"}

Validation:
    Update schemas accept any subset of fields; an explicit null for a
    required column is rejected rather than written.
"""
