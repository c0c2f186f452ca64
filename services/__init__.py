from services.errors import ErrorKind, ServiceError
from services.base import Services

__all__ = ["ErrorKind", "ServiceError", "Services"]
