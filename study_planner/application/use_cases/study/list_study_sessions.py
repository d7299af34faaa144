# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from study_planner.domain.study import StudyRepository, StudySession


class ListStudySessionsUseCase:
    def __init__(self, study_repo: StudyRepository) -> None:
        self._repo = study_repo

    def execute(self, account_id: str, task_id: str) -> Sequence[StudySession]:
        return self._repo.list_sessions(account_id, task_id)


__all__ = ["ListStudySessionsUseCase"]
