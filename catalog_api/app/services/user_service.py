"""
Business logic for users.

The ``UserService`` validates user payloads and keeps email addresses
unique.  Emails are stored trimmed and lowercased, and incoming
addresses are normalized the same way before the uniqueness check, so
``A@B.com`` and ``a@b.com`` are the same user.

Updates are partial: only ``name``, ``email`` and ``age`` may be sent,
and every supplied field is validated before anything is written.
"""

import logging
from typing import Any, Dict, List, Optional

from ..core.errors import BadRequestError, ConflictError, NotFoundError
from ..core.store import RecordStore
from ..schemas.user import UserDeleted, UserRead
from .validators import clean_age, clean_email, clean_name, parse_record_id, require_body_id


logger = logging.getLogger(__name__)

USER_FIELDS = ("name", "email", "age")


class UserService:
    """User account operations on top of a record store."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    async def list_users(self) -> List[UserRead]:
        return [UserRead(**u) for u in self.store.all()]

    async def get_user(self, raw_id: Any) -> UserRead:
        user_id = parse_record_id(raw_id)
        user = self.store.get(user_id)
        if user is None:
            raise NotFoundError("User not found", f"No user exists with ID: {user_id}")
        return UserRead(**user)

    async def create_user(self, body: Dict[str, Any]) -> UserRead:
        """Validate ``body`` and store a new user.

        All of ``name``, ``email`` and ``age`` are required; an age of
        ``0`` counts as present.
        """
        missing = [f for f in USER_FIELDS if body.get(f) is None or body.get(f) == ""]
        if missing:
            raise BadRequestError(
                "Missing data",
                f"Name, email and age are required (missing: {', '.join(missing)})",
                required=list(USER_FIELDS),
            )
        email = clean_email(body["email"])
        age = clean_age(body["age"])
        name = clean_name(body["name"])

        with self.store.transaction():
            self._ensure_email_free(email)
            user = self.store.insert({"name": name, "email": email, "age": age})
        logger.info("Created user %s <%s>", user["id"], user["email"])
        return UserRead(**user)

    async def update_user(self, body: Dict[str, Any]) -> UserRead:
        """Apply a partial update described by ``body``.

        ``body["id"]`` selects the user; the remaining keys are the
        fields to change.  Nothing is written unless every supplied
        field is valid.
        """
        user_id = require_body_id(body, "update")
        updates = {k: v for k, v in body.items() if k != "id"}

        with self.store.transaction():
            if self.store.get(user_id) is None:
                raise NotFoundError("User not found", f"No user exists with ID: {user_id}")

            invalid = [k for k in updates if k not in USER_FIELDS]
            if invalid:
                raise BadRequestError(
                    "Invalid fields",
                    f"Fields not allowed: {', '.join(invalid)}",
                    invalidFields=invalid,
                    allowedFields=list(USER_FIELDS),
                )

            cleaned: Dict[str, Any] = {}
            if "email" in updates:
                cleaned["email"] = clean_email(updates["email"])
                self._ensure_email_free(cleaned["email"], exclude_id=user_id)
            if "age" in updates:
                cleaned["age"] = clean_age(updates["age"])
            if "name" in updates:
                cleaned["name"] = clean_name(updates["name"])

            user = self.store.update(user_id, cleaned)
        logger.info("Updated user %s: %s", user_id, ", ".join(sorted(cleaned)) or "no changes")
        return UserRead(**user)

    async def delete_user(self, body: Dict[str, Any]) -> UserDeleted:
        user_id = require_body_id(body, "delete")
        with self.store.transaction():
            user = self.store.delete(user_id)
            if user is None:
                raise NotFoundError(
                    "User not found",
                    f"Cannot delete. No user exists with ID: {user_id}",
                )
            remaining = self.store.count()
        logger.info("Deleted user %s, %d remaining", user_id, remaining)
        return UserDeleted(
            message="User deleted successfully",
            deleted_user=UserRead(**user),
            remaining_users=remaining,
        )

    def _ensure_email_free(self, email: str, exclude_id: Optional[int] = None) -> None:
        clash = self.store.find(lambda u: u["email"] == email and u["id"] != exclude_id)
        if clash is not None:
            raise ConflictError("Duplicate email", "Another user already uses this email")
