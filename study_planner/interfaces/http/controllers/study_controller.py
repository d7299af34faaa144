# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, g, jsonify, request

from study_planner.application.use_cases.study.get_profile import GetProfileUseCase
from study_planner.application.use_cases.study.get_progress import GetProgressUseCase
from study_planner.application.use_cases.study.list_study_sessions import (
    ListStudySessionsUseCase,
)
from study_planner.application.use_cases.study.list_subjects import ListSubjectsUseCase
from study_planner.application.use_cases.study.list_tasks import ListTasksUseCase
from study_planner.domain.accounts.repositories import TokenIssuer
from study_planner.interfaces.http.auth import bearer_required
from study_planner.interfaces.http.dto.study import (
    ProfileDTO,
    ProgressDTO,
    StudySessionDTO,
    SubjectDTO,
    TaskDTO,
)
from study_planner.shared.errors.base import ValidationError


def _required_arg(name: str) -> str:
    value = (request.args.get(name) or "").strip()
    if not value:
        raise ValidationError(f"{name} is required")
    return value


class StudyController:
    def __init__(
        self,
        *,
        tokens: TokenIssuer,
        get_profile: GetProfileUseCase,
        list_subjects: ListSubjectsUseCase,
        list_tasks: ListTasksUseCase,
        list_study_sessions: ListStudySessionsUseCase,
        get_progress: GetProgressUseCase,
    ) -> None:
        self._tokens = tokens
        self._get_profile = get_profile
        self._list_subjects = list_subjects
        self._list_tasks = list_tasks
        self._list_study_sessions = list_study_sessions
        self._get_progress = get_progress

    def profile(self) -> Response:
        account = self._get_profile.execute(g.account_id)
        return jsonify(ProfileDTO.model_validate(account).model_dump())

    def subjects(self) -> Response:
        subjects = self._list_subjects.execute(g.account_id)
        return jsonify([SubjectDTO.model_validate(s).model_dump() for s in subjects])

    def tasks(self) -> Response:
        subject_id = _required_arg("subject_id")
        tasks = self._list_tasks.execute(g.account_id, subject_id)
        return jsonify([TaskDTO.model_validate(t).model_dump() for t in tasks])

    def study_sessions(self) -> Response:
        task_id = _required_arg("task_id")
        sessions = self._list_study_sessions.execute(g.account_id, task_id)
        return jsonify([StudySessionDTO.model_validate(s).model_dump() for s in sessions])

    def progress(self) -> Response:
        summary = self._get_progress.execute(g.account_id)
        return jsonify(ProgressDTO.model_validate(summary).model_dump())

    def as_blueprint(self) -> Blueprint:
        guard = bearer_required(self._tokens)
        bp = Blueprint("study", __name__, url_prefix="/api")
        bp.add_url_rule("/profile", view_func=guard(self.profile), methods=["GET"])
        bp.add_url_rule("/subjects", view_func=guard(self.subjects), methods=["GET"])
        bp.add_url_rule("/tasks", view_func=guard(self.tasks), methods=["GET"])
        bp.add_url_rule(
            "/study-sessions", view_func=guard(self.study_sessions), methods=["GET"]
        )
        bp.add_url_rule("/progress", view_func=guard(self.progress), methods=["GET"])
        return bp
