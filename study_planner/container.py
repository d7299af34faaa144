# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Application dependency container.

Built once per app from an explicit ``AppConfig``; nothing below it reads the
process environment.
"""

from __future__ import annotations

from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from study_planner.application.services.password_hashing import WerkzeugPasswordHasher
from study_planner.application.services.tokens import JwtTokenIssuer
from study_planner.application.use_cases.accounts.login_account import LoginAccountUseCase
from study_planner.application.use_cases.accounts.register_account import (
    RegisterAccountUseCase,
)
from study_planner.application.use_cases.study.get_profile import GetProfileUseCase
from study_planner.application.use_cases.study.get_progress import GetProgressUseCase
from study_planner.application.use_cases.study.list_study_sessions import (
    ListStudySessionsUseCase,
)
from study_planner.application.use_cases.study.list_subjects import ListSubjectsUseCase
from study_planner.application.use_cases.study.list_tasks import ListTasksUseCase
from study_planner.infrastructure.db import build_engine, build_session_factory
from study_planner.infrastructure.repositories.accounts import SqlAlchemyAccountRepository
from study_planner.infrastructure.repositories.study import SqlAlchemyStudyRepository
from study_planner.interfaces.http.controllers.auth_controller import AuthController
from study_planner.interfaces.http.controllers.misc_controller import MiscController
from study_planner.interfaces.http.controllers.study_controller import StudyController
from study_planner.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    # Storage

    @cached_property
    def engine(self) -> Engine:
        return build_engine(self.config.database)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return build_session_factory(self.engine)

    @cached_property
    def account_repository(self) -> SqlAlchemyAccountRepository:
        return SqlAlchemyAccountRepository(self.session_factory)

    @cached_property
    def study_repository(self) -> SqlAlchemyStudyRepository:
        return SqlAlchemyStudyRepository(self.session_factory)

    # Credentials

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_issuer(self) -> JwtTokenIssuer:
        return JwtTokenIssuer(self.config.auth)

    # Use cases

    @cached_property
    def register_account_use_case(self) -> RegisterAccountUseCase:
        return RegisterAccountUseCase(
            accounts=self.account_repository,
            tokens=self.token_issuer,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_account_use_case(self) -> LoginAccountUseCase:
        return LoginAccountUseCase(
            accounts=self.account_repository,
            tokens=self.token_issuer,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def get_profile_use_case(self) -> GetProfileUseCase:
        return GetProfileUseCase(self.account_repository)

    @cached_property
    def list_subjects_use_case(self) -> ListSubjectsUseCase:
        return ListSubjectsUseCase(self.study_repository)

    @cached_property
    def list_tasks_use_case(self) -> ListTasksUseCase:
        return ListTasksUseCase(self.study_repository)

    @cached_property
    def list_study_sessions_use_case(self) -> ListStudySessionsUseCase:
        return ListStudySessionsUseCase(self.study_repository)

    @cached_property
    def get_progress_use_case(self) -> GetProgressUseCase:
        return GetProgressUseCase(self.study_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_account_use_case,
            login_use_case=self.login_account_use_case,
        )

    @cached_property
    def study_controller(self) -> StudyController:
        return StudyController(
            tokens=self.token_issuer,
            get_profile=self.get_profile_use_case,
            list_subjects=self.list_subjects_use_case,
            list_tasks=self.list_tasks_use_case,
            list_study_sessions=self.list_study_sessions_use_case,
            get_progress=self.get_progress_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()
