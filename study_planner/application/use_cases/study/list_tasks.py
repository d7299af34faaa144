# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from study_planner.domain.study import StudyRepository, Task


class ListTasksUseCase:
    def __init__(self, study_repo: StudyRepository) -> None:
        self._repo = study_repo

    def execute(self, account_id: str, subject_id: str) -> Sequence[Task]:
        return self._repo.list_tasks(account_id, subject_id)


__all__ = ["ListTasksUseCase"]
