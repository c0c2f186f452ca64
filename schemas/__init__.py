import re
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from enum import Enum

from config import MAX_NAME_LENGTH, MIN_PASSWORD_LENGTH

from .accounts import *
from .categories import *
from .products import *
from .baskets import *
from .settings import *
