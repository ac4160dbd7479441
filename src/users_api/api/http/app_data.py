from dataclasses import dataclass

from src.users_api.core.services import DbSessionService
from src.users_api.entities.user.repository import UserRepository


@dataclass
class ApplicationDependencies:
    """Process-wide infrastructure created at startup.

    Exactly one of ``database_service`` (SQL backend) and ``user_repository``
    (memory backend) is set.
    """

    database_service: DbSessionService | None = None
    user_repository: UserRepository | None = None
