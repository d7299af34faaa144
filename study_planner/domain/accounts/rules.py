# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Input rules shared by registration and login."""

from __future__ import annotations

from email_validator import EmailNotValidError, validate_email

from study_planner.shared.errors.base import ValidationError

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6


def username_problem(username: str) -> str | None:
    if len(username) < MIN_USERNAME_LENGTH:
        return f"Username must be at least {MIN_USERNAME_LENGTH} characters long"
    return None


def email_problem(email: str) -> str | None:
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return "Invalid email address"
    return None


def password_problem(password: str) -> str | None:
    if len(password) < MIN_PASSWORD_LENGTH:
        return f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
    return None


def ensure_valid(*problems: str | None) -> None:
    reasons = [problem for problem in problems if problem]
    if reasons:
        raise ValidationError("; ".join(reasons))


def validate_registration(username: str, email: str, password: str) -> None:
    ensure_valid(username_problem(username), email_problem(email), password_problem(password))


def validate_login(username: str, password: str) -> None:
    ensure_valid(username_problem(username), password_problem(password))
