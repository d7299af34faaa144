from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_serializer


class RegisterRequestDTO(BaseModel):
    # Length and email rules live in the registration flow; this only checks shape.
    model_config = ConfigDict(strict=True)

    username: str
    email: str
    password: str


class LoginRequestDTO(BaseModel):
    model_config = ConfigDict(strict=True)

    username: str
    password: str


class RegisterResponseDTO(BaseModel):
    id: str
    username: str
    email: str
    token: str
    created_at: datetime

    @field_serializer("created_at")
    def _serialize_created_at(self, value: datetime) -> str:
        return value.isoformat()


class LoginResponseDTO(BaseModel):
    token: str
