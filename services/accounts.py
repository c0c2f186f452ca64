"""Inscription, connexion et profils des comptes."""

import logging
from typing import List, Optional, Tuple

from models import Account, AccountRole, UserSession
from schemas import AccountResponse, AdminCreate, AdminEdit, ClientCreate, ClientEdit
from services.errors import ErrorKind, ServiceError
from utils.security import gen_token, normalize_login, normalize_phone

logger = logging.getLogger(__name__)


def account_response(account: Account, hide_deposit: bool = False) -> AccountResponse:
    """Profil public d'un compte.

    Le login et le mot de passe ne sont jamais exposés. Avec ``hide_deposit``
    le solde d'un client est remplacé par le marqueur ``userType``.
    """
    response = AccountResponse(
        id=account.id,
        first_name=account.first_name,
        last_name=account.last_name,
        patronymic=account.patronymic,
        email=account.email,
        address=account.address,
        phone=account.phone,
        position=account.position,
    )
    if hide_deposit:
        response.user_type = AccountRole.CLIENT.value
    elif account.is_client:
        response.deposit = account.deposit
    return response


class AccountService:
    """Service de gestion des comptes.

    Args:
        guard: Garde d'autorisation.
        account_dao: Accès à la table des comptes.
        session_dao: Accès à la table des sessions.
    """

    def __init__(self, guard, account_dao, session_dao):
        self.guard = guard
        self.accounts = account_dao
        self.sessions = session_dao

    def register_client(self, client: ClientCreate) -> Tuple[AccountResponse, str]:
        login = self._check_login_free(client.login)

        account = Account(
            role=AccountRole.CLIENT.value,
            first_name=client.first_name,
            last_name=client.last_name,
            patronymic=client.patronymic,
            email=str(client.email),
            address=client.address,
            phone=normalize_phone(client.phone),
            login=login,
            deposit=0,
        )
        return self._register(account, client.password)

    def register_admin(self, admin: AdminCreate) -> Tuple[AccountResponse, str]:
        login = self._check_login_free(admin.login)

        account = Account(
            role=AccountRole.ADMIN.value,
            first_name=admin.first_name,
            last_name=admin.last_name,
            patronymic=admin.patronymic,
            position=admin.position,
            login=login,
        )
        return self._register(account, admin.password)

    def login(self, login: str, password: str) -> str:
        """Ouvre une session et renvoie son jeton.

        Un login inconnu et un mauvais mot de passe donnent la même erreur.
        """
        account = self.accounts.get_by_login(normalize_login(login))
        if account is None or not account.verify_password(password):
            raise ServiceError(ErrorKind.USER_NOT_FOUND)

        token = self._open_session(account)
        logger.info(f"Connexion du compte {account.id}")
        return token

    def logout(self, token: Optional[str]) -> None:
        if not token:
            return
        session = self.sessions.get(token)
        if session is not None:
            self.sessions.delete(session)

    def get_current(self, token: Optional[str]) -> AccountResponse:
        return account_response(self.guard.resolve(token))

    def edit_client(self, token: Optional[str], client: ClientEdit) -> AccountResponse:
        account = self.guard.require_client(token)
        self._check_old_password(account, client.old_password)

        account.first_name = client.first_name
        account.last_name = client.last_name
        account.patronymic = client.patronymic
        account.email = str(client.email)
        account.address = client.address
        account.phone = normalize_phone(client.phone)
        account.set_password(client.new_password)

        self.accounts.update(account)
        return account_response(account)

    def edit_admin(self, token: Optional[str], admin: AdminEdit) -> AccountResponse:
        account = self.guard.require_admin(token)
        self._check_old_password(account, admin.old_password)

        account.first_name = admin.first_name
        account.last_name = admin.last_name
        account.patronymic = admin.patronymic
        account.position = admin.position
        account.set_password(admin.new_password)

        self.accounts.update(account)
        return account_response(account)

    def list_clients(self, token: Optional[str]) -> List[AccountResponse]:
        self.guard.require_admin(token)
        return [account_response(client, hide_deposit=True) for client in self.accounts.get_clients()]

    def _check_login_free(self, login: str) -> str:
        login = normalize_login(login)
        if self.accounts.exists(login):
            raise ServiceError(ErrorKind.LOGIN_ALREADY_IN_USE, "login")
        return login

    def _check_old_password(self, account: Account, password: str) -> None:
        if not account.verify_password(password):
            raise ServiceError(ErrorKind.WRONG_PASSWORD, "oldPassword")

    def _register(self, account: Account, password: str) -> Tuple[AccountResponse, str]:
        account.set_password(password)
        self.accounts.insert(account)
        token = self._open_session(account)
        logger.info(f"Inscription du compte {account.id} ({account.role})")
        return account_response(account), token

    def _open_session(self, account: Account) -> str:
        session = UserSession(token=gen_token(), account_id=account.id)
        self.sessions.insert(session)
        return session.token
