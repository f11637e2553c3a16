from ninja import Schema
from typing import Optional
from datetime import datetime
from uuid import UUID

class UserOut(Schema):
    id: UUID
    username: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    is_staff: bool
    date_joined: datetime
    last_login: Optional[datetime] = None

class AuthorOut(Schema):
    """Краткая информация об авторе для списков статей"""
    id: UUID
    name: str

    @staticmethod
    def resolve_name(obj):
        return obj.get_full_name()

class AuthIn(Schema):
    username: str
    password: str

class RefreshIn(Schema):
    refresh: str

class TokenOut(Schema):
    access: str
    refresh: str
    user: UserOut

class AccessTokenOut(Schema):
    access: str
