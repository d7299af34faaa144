# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from study_planner.domain.study import (
    ProgressSummary,
    StudyRepository,
    StudySession,
    Subject,
    Task,
)
from study_planner.infrastructure.db import models
from study_planner.infrastructure.db.session import SessionFactory, session_scope
from study_planner.shared.errors.base import DatabaseError


class SqlAlchemyStudyRepository(StudyRepository):
    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    def list_subjects(self, account_id: str) -> Sequence[Subject]:
        stmt = (
            select(models.Subject)
            .where(models.Subject.user_id == account_id)
            .order_by(models.Subject.created_at.asc(), models.Subject.id.asc())
        )
        try:
            with session_scope(self._session_factory) as session:
                rows = session.scalars(stmt).all()
                return [
                    Subject(id=row.id, name=row.name, description=row.description)
                    for row in rows
                ]
        except SQLAlchemyError as exc:
            raise DatabaseError(f"subjects query failed: {type(exc).__name__}") from exc

    def list_tasks(self, account_id: str, subject_id: str) -> Sequence[Task]:
        stmt = (
            select(models.Task)
            .join(models.Subject, models.Subject.id == models.Task.subject_id)
            .where(models.Task.subject_id == subject_id, models.Subject.user_id == account_id)
            .order_by(models.Task.created_at.asc(), models.Task.id.asc())
        )
        try:
            with session_scope(self._session_factory) as session:
                rows = session.scalars(stmt).all()
                return [
                    Task(
                        id=row.id,
                        title=row.title,
                        description=row.description,
                        deadline=row.deadline,
                        difficulty_level=row.difficulty_level,
                    )
                    for row in rows
                ]
        except SQLAlchemyError as exc:
            raise DatabaseError(f"tasks query failed: {type(exc).__name__}") from exc

    def list_sessions(self, account_id: str, task_id: str) -> Sequence[StudySession]:
        stmt = (
            select(models.StudySession)
            .join(models.Task, models.Task.id == models.StudySession.task_id)
            .join(models.Subject, models.Subject.id == models.Task.subject_id)
            .where(models.StudySession.task_id == task_id, models.Subject.user_id == account_id)
            .order_by(models.StudySession.scheduled_at.asc(), models.StudySession.id.asc())
        )
        try:
            with session_scope(self._session_factory) as session:
                rows = session.scalars(stmt).all()
                return [
                    StudySession(
                        id=row.id,
                        scheduled_at=row.scheduled_at,
                        duration=row.duration,
                        completed=bool(row.completed),
                    )
                    for row in rows
                ]
        except SQLAlchemyError as exc:
            raise DatabaseError(f"study sessions query failed: {type(exc).__name__}") from exc

    def progress(self, account_id: str) -> ProgressSummary:
        stmt = select(
            func.coalesce(func.sum(models.Progress.completed_tasks), 0),
            func.coalesce(func.sum(models.Progress.total_tasks), 0),
        ).where(models.Progress.user_id == account_id)
        try:
            with session_scope(self._session_factory) as session:
                completed, total = session.execute(stmt).one()
        except SQLAlchemyError as exc:
            raise DatabaseError(f"progress query failed: {type(exc).__name__}") from exc
        return ProgressSummary(completed_tasks=int(completed), total_tasks=int(total))
