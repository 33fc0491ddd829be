from __future__ import annotations

import logging

from ..common.validators import require_max_length, require_non_empty
from ..core.constants import MAX_NAME_LENGTH
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Use case: identify a user by display name (login without password)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def identify(self, name) -> User:
        name = require_non_empty(name, "Nombre requerido")
        require_max_length(name, "Nombre demasiado largo", MAX_NAME_LENGTH)
        existing = self._users.get_by_name(name)
        if existing:
            return existing

        user = self._users.get_or_create(name)
        logger.info("Created user %s (%s)", user.user_id, user.name)
        return user
