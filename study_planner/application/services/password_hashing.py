"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from study_planner.domain.accounts.repositories import PasswordHasher
from study_planner.shared.errors.base import HashingError


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted hashing with werkzeug's default method and work factor.

    Each call draws a fresh salt, so hashing the same password twice yields two
    different strings that both verify. Comparison is constant-time.
    """

    def hash(self, password: str) -> str:
        try:
            return str(generate_password_hash(password))
        except (TypeError, ValueError) as exc:
            raise HashingError(f"hash failed: {type(exc).__name__}") from exc

    def verify(self, password: str, hashed: str) -> bool:
        # Hashes without a method/salt/digest layout are plain mismatches;
        # a layout naming an unusable method is a hashing fault.
        try:
            return bool(check_password_hash(hashed, password))
        except (TypeError, ValueError) as exc:
            raise HashingError(f"unparseable password hash: {type(exc).__name__}") from exc
