"""Contrôle d'accès par jeton de session."""

from typing import Optional

from models import Account
from services.errors import ErrorKind, ServiceError


class AuthorizationGuard:
    """Résout un jeton de session en compte et vérifie son rôle.

    Le garde n'a pas d'état propre : chaque appel lit la table des sessions.

    Args:
        session_dao: Accès à la table des sessions.
    """

    def __init__(self, session_dao):
        self.sessions = session_dao

    def resolve(self, token: Optional[str]) -> Account:
        """Compte propriétaire de la session.

        Raises:
            ServiceError: NotLoggedIn si le jeton est absent, vide ou inconnu.
        """
        if token is None or not token.strip():
            raise ServiceError(ErrorKind.NOT_LOGGED_IN)

        session = self.sessions.get(token)
        if session is None:
            raise ServiceError(ErrorKind.NOT_LOGGED_IN)
        return session.account

    def require_admin(self, token: Optional[str]) -> Account:
        account = self.resolve(token)
        if not account.is_admin:
            raise ServiceError(ErrorKind.NOT_ADMIN)
        return account

    def require_client(self, token: Optional[str]) -> Account:
        account = self.resolve(token)
        if not account.is_client:
            raise ServiceError(ErrorKind.NOT_CLIENT)
        return account
