# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import ProgressSummary, StudySession, Subject, Task
from .repositories import StudyRepository

__all__ = ["ProgressSummary", "StudyRepository", "StudySession", "Subject", "Task"]
