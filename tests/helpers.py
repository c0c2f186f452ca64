"""Helper utilities for tests."""

from schemas import AdminCreate, ClientCreate

PASSWORD = "password123"


def client_data(login: str = "ivanov", **overrides) -> dict:
    """Valid client registration payload, camelCase as sent over HTTP."""
    data = {
        "firstName": "Иван",
        "lastName": "Иванов",
        "patronymic": "Иванович",
        "email": "ivanov@mail.ru",
        "address": "Москва, ул. Ленина, 1",
        "phone": "+7-912-345-67-89",
        "login": login,
        "password": PASSWORD,
    }
    data.update(overrides)
    return data


def admin_data(login: str = "petrov", **overrides) -> dict:
    """Valid administrator registration payload."""
    data = {
        "firstName": "Пётр",
        "lastName": "Петров",
        "position": "Менеджер",
        "login": login,
        "password": PASSWORD,
    }
    data.update(overrides)
    return data


def register_client(services, login: str = "ivanov", **overrides) -> str:
    """Register a client through the account service and return its token."""
    _, token = services.accounts.register_client(ClientCreate(**client_data(login, **overrides)))
    return token


def register_admin(services, login: str = "petrov", **overrides) -> str:
    """Register an administrator through the account service and return its token."""
    _, token = services.accounts.register_admin(AdminCreate(**admin_data(login, **overrides)))
    return token


def error_codes(response) -> list:
    """(errorCode, field) pairs of an HTTP error response."""
    return [(error["errorCode"], error["field"]) for error in response.json()["errors"]]
