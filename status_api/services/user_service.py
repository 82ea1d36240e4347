# status_api/services/user_service.py
"""User use cases and the status-code decision logic behind them.

Every operation runs its checks in a fixed order and the first failing check
raises the matching ``AppError``. Ids and request bodies arrive already
checked and parsed by the route layer.
"""

from __future__ import annotations

from status_api.core.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationFailedError,
)
from status_api.core.validation import validate_user, validate_user_patch
from status_api.entities.user import User, UserPatch
from status_api.repositories.user_repository import InMemoryUserRepository


class UserService:
    def __init__(self, user_repository: InMemoryUserRepository) -> None:
        self._user_repository = user_repository

    def _require_existing(self, user_id: int) -> None:
        if not self._user_repository.exists(user_id):
            raise NotFoundError("User not found", [f"User with ID {user_id} does not exist"])

    # -------------------------
    # Consultas
    # -------------------------

    def list_users(self) -> list[User]:
        return self._user_repository.list_active()

    def get_user(self, user_id: int) -> User:
        user = self._user_repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found", [f"User with ID {user_id} does not exist"])
        return user

    # -------------------------
    # Escrita
    # -------------------------

    def create_user(self, user: User) -> User:
        errors = validate_user(user)
        if errors:
            raise ValidationFailedError(errors)

        with self._user_repository.session() as repo:
            if repo.email_exists(user.email):
                raise ConflictError(
                    "Email already exists",
                    [f"A user with email '{user.email}' already exists"],
                )
            return repo.create(user)

    def update_user(self, user_id: int, user: User) -> User:
        errors = validate_user(user)
        if errors:
            raise ValidationFailedError(errors)

        with self._user_repository.session() as repo:
            self._require_existing(user_id)

            if repo.email_exists(user.email, exclude_id=user_id):
                raise ConflictError(
                    "Email already exists",
                    [f"Another user with email '{user.email}' already exists"],
                )
            return repo.update(user_id, user)

    def patch_user(self, user_id: int, patch: UserPatch) -> User | None:
        """Apply a partial update.

        Returns ``None`` when the patch carried no field at all, so the caller
        can answer 204; the update timestamp is still stamped in that case.
        """
        errors = validate_user_patch(patch)
        if errors:
            raise ValidationFailedError(errors)

        with self._user_repository.session() as repo:
            self._require_existing(user_id)

            if patch.email and repo.email_exists(patch.email, exclude_id=user_id):
                raise ConflictError(
                    "Email already exists",
                    [f"Another user with email '{patch.email}' already exists"],
                )

            updated = repo.patch(user_id, patch)

        if updated is not None and patch.is_empty():
            return None
        return updated

    def delete_user(self, user_id: int) -> None:
        with self._user_repository.session() as repo:
            self._require_existing(user_id)

            # FIXME: polaridade invertida, só contas de sistema podem ser
            # removidas (403 para as demais). Pendente de decisão de produto.
            user = repo.get_by_id(user_id)
            if user is not None and not user.is_system_account:
                raise ForbiddenError("Operation not permitted", ["System accounts cannot be deleted"])

            repo.delete(user_id)
