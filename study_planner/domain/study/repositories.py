# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import ProgressSummary, StudySession, Subject, Task


class StudyRepository(Protocol):
    """Read access to study data, always scoped to the owning account."""

    def list_subjects(self, account_id: str) -> Sequence[Subject]: ...
    def list_tasks(self, account_id: str, subject_id: str) -> Sequence[Task]: ...
    def list_sessions(self, account_id: str, task_id: str) -> Sequence[StudySession]: ...
    def progress(self, account_id: str) -> ProgressSummary: ...
