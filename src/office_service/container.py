from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .database.connection import DBConfig, DatabaseConnection
from .database.transaction import TransactionManager
from .offices.service import OfficeService
from .offices.sql_office_repository import SqlOfficeRepository
from .roles.sql_role_repository import SqlRoleRepository
from .users.service import UserService
from .users.sql_user_repository import SqlUserRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    transactions: TransactionManager

    users_repo: SqlUserRepository
    roles_repo: SqlRoleRepository
    offices_repo: SqlOfficeRepository

    user_service: UserService
    office_service: OfficeService


def build_container(*, db_config: dict, database_url: Optional[str] = None, echo: bool = False) -> Container:
    """Wire repositories and services.

    ``database_url`` overrides the MySQL URL built from ``db_config``.
    """

    url = database_url or DBConfig.from_dict(db_config).url()
    conn = DatabaseConnection(url, echo=echo)
    transactions = TransactionManager(conn)

    users_repo = SqlUserRepository(conn)
    roles_repo = SqlRoleRepository(conn)
    offices_repo = SqlOfficeRepository(conn)

    user_service = UserService(users_repo, roles_repo, transactions)
    office_service = OfficeService(offices_repo, transactions)

    return Container(
        conn=conn,
        transactions=transactions,
        users_repo=users_repo,
        roles_repo=roles_repo,
        offices_repo=offices_repo,
        user_service=user_service,
        office_service=office_service,
    )
