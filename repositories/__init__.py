"""
Async repositories over the ORM models.

Modules:
    base: CrudRepository, generic list/get/create/update/delete
    users: Users, with password hashing on every write
    auth_tokens: Issued bearer tokens
    notebooks: Run bookkeeping rows and dashboard metrics
    organizations: Organizations

Usage:
    async with session_maker() as session:
        users = UserRepository(session)
        user = await users.update(user_id, {"phone": "555"})
"""
