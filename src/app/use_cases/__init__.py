"""
Use Cases

Organized into domain folders:
- auth/: Registration, login, logout and password reset
- users/: Administrative user management
"""
