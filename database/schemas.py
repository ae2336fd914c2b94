from pydantic import BaseModel, Field, StrictInt, field_validator
from typing import Optional, List, Union
from datetime import datetime


def _numbers_to_str(value):
    # Dashboard prompts send strings, scripted clients often send numbers
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


# --- Requests ---

class IdRequest(BaseModel):
    id: str

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value):
        return _numbers_to_str(value)


class ChangeVersionRequest(IdRequest):
    version: str

    @field_validator("version", mode="before")
    @classmethod
    def coerce_version(cls, value):
        return _numbers_to_str(value)


class AdjustResourcesRequest(IdRequest):
    # Integer strings pass through; bools and floats are rejected
    cpu: Union[StrictInt, str]
    ram: Union[StrictInt, str]


class FundsRequest(BaseModel):
    player_id: str = Field(alias="playerId")
    # Parsed by the dispatcher so CLI and HTTP share the same integer rules
    amount: Union[StrictInt, str]

    @field_validator("player_id", mode="before")
    @classmethod
    def coerce_player_id(cls, value):
        return _numbers_to_str(value)


class UserLogin(BaseModel):
    username: str
    password: str


# --- Responses ---

class MessageResponse(BaseModel):
    message: str


class Token(BaseModel):
    access_token: str
    token_type: str


class ServerResponse(BaseModel):
    id: str
    name: str
    type: str
    version: str
    status: str
    resources: dict

    class Config:
        from_attributes = True


class PlayerResponse(BaseModel):
    id: str
    name: str
    status: str
    balance: int

    class Config:
        from_attributes = True


class UserResponse(BaseModel):
    id: str
    username: str
    balance: int
    role: str
    two_factor_enabled: bool
    purchased_addons: List[str]
    purchased_themes: List[str]

    class Config:
        from_attributes = True


class CatalogItemResponse(BaseModel):
    id: str
    name: str
    price: int
    description: Optional[str]

    class Config:
        from_attributes = True


class BackupResponse(BaseModel):
    id: str
    server_id: Optional[str]
    name: str
    date: datetime

    class Config:
        from_attributes = True


class DatabaseResponse(BaseModel):
    id: str
    name: str
    type: str

    class Config:
        from_attributes = True


class TaskResponse(BaseModel):
    id: str
    name: str
    schedule: str

    class Config:
        from_attributes = True


class BitacoraEntry(BaseModel):
    id: str
    timestamp: Optional[datetime]
    username: Optional[str]
    action: Optional[str]
    message: str

    class Config:
        from_attributes = True


class TransactionResponse(BaseModel):
    id: str
    account_kind: str
    account_id: str
    transaction_type: str
    amount: int
    date: datetime

    class Config:
        from_attributes = True


class SystemStats(BaseModel):
    cpu: float
    memory_used: int
    memory_total: int
    panel_rss_mb: int
    uptime: int
