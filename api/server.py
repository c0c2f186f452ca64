from fastapi import APIRouter, Depends, HTTPException

from config import DEBUG
from schemas import SettingsResponse
from services import Services
from .deps import get_services

router = APIRouter()

@router.get("/settings", response_model=SettingsResponse)
def settings(services: Services = Depends(get_services)):
    return services.server.settings()

# Nettoyage complet de la base, seulement en mode debug
@router.post("/debug/clear")
def clear_database(services: Services = Depends(get_services)):
    if not DEBUG:
        raise HTTPException(status_code=404, detail="Not Found")
    services.server.clear()
    return {}
