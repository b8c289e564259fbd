from enum import Enum
from pydantic import BaseModel
from typing import Optional

class AccountType(str, Enum):
    ADMIN = "Admin"
    STUDENT = "Student"
    INSTRUCTOR = "Instructor"

class UserProfile(BaseModel):
    """Профиль пользователя из стора. Выдаётся сервисом авторизации, здесь только читается."""
    first_name: str
    last_name: Optional[str] = None
    email: Optional[str] = None
    account_type: AccountType = AccountType.STUDENT
