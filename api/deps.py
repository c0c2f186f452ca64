from typing import Optional

from fastapi import Cookie, Depends
from sqlalchemy.orm import Session

from config import SESSION_COOKIE
from models import get_db
from services import Services

def get_services(db: Session = Depends(get_db)) -> Services:
    return Services(db)

# Jeton de session transporté dans un cookie ; absent = None
def get_token(token: Optional[str] = Cookie(None, alias=SESSION_COOKIE)) -> Optional[str]:
    return token
