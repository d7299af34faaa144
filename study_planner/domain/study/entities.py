# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Subject:
    id: str
    name: str
    description: str | None


@dataclass(slots=True, frozen=True)
class Task:
    id: str
    title: str
    description: str | None
    deadline: str | None
    difficulty_level: int | None


@dataclass(slots=True, frozen=True)
class StudySession:
    id: str
    scheduled_at: str
    duration: int  # minutes
    completed: bool


@dataclass(slots=True, frozen=True)
class ProgressSummary:
    completed_tasks: int
    total_tasks: int
