# status_api/repositories/user_repository.py

from __future__ import annotations

import itertools
import logging
from datetime import datetime
from typing import Callable

from status_api.core.base_repository import BaseRepository
from status_api.entities.user import User, UserPatch, utcnow

logger = logging.getLogger(__name__)


class InMemoryUserRepository(BaseRepository[User]):
    """Process-local user store with soft-delete semantics.

    Rows are never physically removed. Reads by id, email, list and the
    ``exists`` checks only see active rows, while ``update``, ``patch`` and
    ``delete`` address any row so inactive records stay editable.
    """

    def __init__(self, *, clock: Callable[[], datetime] = utcnow) -> None:
        super().__init__()
        self._users: dict[int, User] = {}
        self._ids = itertools.count(1)
        self._clock = clock

    def list_active(self) -> list[User]:
        with self._lock:
            return [u for u in self._users.values() if u.is_active]

    def get_by_id(self, user_id: int) -> User | None:
        with self._lock:
            user = self._users.get(user_id)
            if user is None or not user.is_active:
                return None
            return user

    def get_by_email(self, email: str) -> User | None:
        with self._lock:
            for user in self._users.values():
                if user.is_active and user.email == email:
                    return user
            return None

    # ✅ inclui inativos (update/patch/delete não filtram por is_active)
    def _get_any(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def create(self, user: User) -> User:
        with self._lock:
            user.id = next(self._ids)
            user.created_at = self._clock()
            self._users[user.id] = user
            logger.info("User created", extra={"user_id": user.id})
            return user

    def update(self, user_id: int, user: User) -> User | None:
        with self._lock:
            existing = self._get_any(user_id)
            if existing is None:
                return None

            existing.email = user.email
            existing.first_name = user.first_name
            existing.last_name = user.last_name
            existing.age = user.age
            existing.is_active = user.is_active
            existing.updated_at = self._clock()
            logger.info("User updated", extra={"user_id": user_id})
            return existing

    def patch(self, user_id: int, patch: UserPatch) -> User | None:
        with self._lock:
            existing = self._get_any(user_id)
            if existing is None:
                return None

            if patch.email is not None:
                existing.email = patch.email
            if patch.first_name is not None:
                existing.first_name = patch.first_name
            if patch.last_name is not None:
                existing.last_name = patch.last_name
            if patch.age is not None:
                existing.age = patch.age
            if patch.is_active is not None:
                existing.is_active = patch.is_active

            existing.updated_at = self._clock()
            logger.info("User patched", extra={"user_id": user_id})
            return existing

    def delete(self, user_id: int) -> bool:
        with self._lock:
            existing = self._get_any(user_id)
            if existing is None:
                return False

            existing.is_active = False
            existing.updated_at = self._clock()
            logger.info("User soft-deleted", extra={"user_id": user_id})
            return True

    def exists(self, user_id: int) -> bool:
        return self.get_by_id(user_id) is not None

    def email_exists(self, email: str, exclude_id: int | None = None) -> bool:
        with self._lock:
            return any(
                u.is_active and u.email == email and (exclude_id is None or u.id != exclude_id)
                for u in self._users.values()
            )


def seed_demo_users(repository: InMemoryUserRepository) -> None:
    repository.create(
        User(
            email="john.doe@example.com",
            first_name="John",
            last_name="Doe",
            age=30,
            is_system_account=False,
        )
    )
    repository.create(
        User(
            email="jane.smith@example.com",
            first_name="Jane",
            last_name="Smith",
            age=25,
            is_system_account=True,
        )
    )
