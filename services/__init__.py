"""
Application services composed from repositories and core utilities.

Modules:
    auth: AuthService (register, login, logout, refresh, change password)
"""
