from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_serializer


class ProfileDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    email: str
    created_at: datetime

    @field_serializer("created_at")
    def _serialize_created_at(self, value: datetime) -> str:
        return value.isoformat()


class SubjectDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None = None


class TaskDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str | None = None
    deadline: str | None = None
    difficulty_level: int | None = None


class StudySessionDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    scheduled_at: str
    duration: int
    completed: bool


class ProgressDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    completed_tasks: int
    total_tasks: int
