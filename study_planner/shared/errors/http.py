# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, g, jsonify, request
from werkzeug.exceptions import HTTPException

from study_planner.shared.logging import logger

from .base import AppError, DatabaseError

INTERNAL_ERROR_MESSAGE = DatabaseError.redacted_message


def error_response(error: AppError) -> tuple[dict[str, str], HTTPStatus]:
    return error.to_dict(), error.status


def register_error_handler(app: Flask, *, debug_mode: bool = False) -> None:
    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        payload, status = error_response(exc)
        if status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            logger.error(
                f"{exc.kind} on {request.method} {request.path}: {exc.message}"
            )
        else:
            logger.warning(
                f"Handled {exc.kind} on {request.method} {request.path}: {exc.message}"
            )
        return jsonify(payload), status

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        return jsonify({"error": exc.description}), exc.code

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        account_id = getattr(g, "account_id", None)
        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"account={account_id}, body_size={len(request.data)}"
            )
        else:
            logger.error(f"Error: {type(exc).__name__} on {request.method} {request.path}")
        return jsonify({"error": INTERNAL_ERROR_MESSAGE}), HTTPStatus.INTERNAL_SERVER_ERROR


__all__ = ["error_response", "register_error_handler"]
