# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from study_planner.domain.study import ProgressSummary, StudyRepository


class GetProgressUseCase:
    def __init__(self, study_repo: StudyRepository) -> None:
        self._repo = study_repo

    def execute(self, account_id: str) -> ProgressSummary:
        return self._repo.progress(account_id)


__all__ = ["GetProgressUseCase"]
