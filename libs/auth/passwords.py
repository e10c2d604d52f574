"""Password hashing helpers (argon2 via pwdlib)."""

from fastapi_users.password import PasswordHelper

_password_helper = PasswordHelper()


def hash_password(password: str) -> str:
    """Hash ``password`` with the shared password helper."""
    candidate = password.strip()
    if not candidate:
        raise ValueError("Password must not be empty")

    return _password_helper.hash(candidate)


def verify_password(password: str, hashed: str) -> bool:
    """Return ``True`` when ``password`` matches the stored hash."""
    try:
        verified, _ = _password_helper.verify_and_update(password, hashed)
    except Exception:
        return False
    return verified
