from typing import Optional

from fastapi import APIRouter, Depends, Response

from config import SESSION_COOKIE
from schemas import (AccountResponse, AdminCreate, AdminEdit, ClientCreate, ClientEdit, List,
                     LoginRequest)
from services import Services
from .deps import get_services, get_token

router = APIRouter()

# ✅ Inscription d'un client, la session est ouverte immédiatement
@router.post("/clients", response_model=AccountResponse, response_model_exclude_none=True)
def register_client(
    client: ClientCreate,
    response: Response,
    services: Services = Depends(get_services),
):
    account, token = services.accounts.register_client(client)
    response.set_cookie(SESSION_COOKIE, token, httponly=True)
    return account

@router.post("/admins", response_model=AccountResponse, response_model_exclude_none=True)
def register_admin(
    admin: AdminCreate,
    response: Response,
    services: Services = Depends(get_services),
):
    account, token = services.accounts.register_admin(admin)
    response.set_cookie(SESSION_COOKIE, token, httponly=True)
    return account

@router.put("/clients", response_model=AccountResponse, response_model_exclude_none=True)
def edit_client(
    client: ClientEdit,
    token: Optional[str] = Depends(get_token),
    services: Services = Depends(get_services),
):
    return services.accounts.edit_client(token, client)

@router.put("/admins", response_model=AccountResponse, response_model_exclude_none=True)
def edit_admin(
    admin: AdminEdit,
    token: Optional[str] = Depends(get_token),
    services: Services = Depends(get_services),
):
    return services.accounts.edit_admin(token, admin)

# Liste des clients pour un administrateur (sans les dépôts)
@router.get("/clients", response_model=List[AccountResponse], response_model_exclude_none=True)
def list_clients(
    token: Optional[str] = Depends(get_token),
    services: Services = Depends(get_services),
):
    return services.accounts.list_clients(token)

@router.get("/accounts", response_model=AccountResponse, response_model_exclude_none=True)
def current_account(
    token: Optional[str] = Depends(get_token),
    services: Services = Depends(get_services),
):
    return services.accounts.get_current(token)

# Route de connexion : nouveau jeton dans le cookie
@router.post("/sessions", response_model=AccountResponse, response_model_exclude_none=True)
def login(
    credentials: LoginRequest,
    response: Response,
    services: Services = Depends(get_services),
):
    token = services.accounts.login(credentials.login, credentials.password)
    response.set_cookie(SESSION_COOKIE, token, httponly=True)
    return services.accounts.get_current(token)

@router.delete("/sessions")
def logout(
    response: Response,
    token: Optional[str] = Depends(get_token),
    services: Services = Depends(get_services),
):
    services.accounts.logout(token)
    response.delete_cookie(SESSION_COOKIE)
    return {}
