from . import BaseModel

class SettingsResponse(BaseModel):
    maxNameLength: int
    minPasswordLength: int
