# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from flask import Flask
from flask_cors import CORS

from study_planner.container import Container
from study_planner.infrastructure.db import init_db
from study_planner.shared.config import AppConfig, load_config
from study_planner.shared.errors import register_error_handler
from study_planner.shared.logging import logger, setup_logging
from study_planner.shared.middleware import (
    configure_request_logging,
    configure_security_headers,
)


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(config.log_level, config.log_file)

    container = Container(config)
    init_db(container.engine)

    app = Flask(__name__)
    app.extensions["study_planner.container"] = container
    register_error_handler(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_security_headers(app, enable_hsts=config.security.enable_hsts)

    CORS(app, resources={r"/api/*": {"origins": config.security.allowed_origins}})

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.study_controller.as_blueprint())

    logger.info(f"Flask app initialized (env={config.app_env})")
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    logger.info(f"Server running at http://{config.host}:{config.port}")
    # One worker thread per request; password hashing never stalls other requests.
    app.run(host=config.host, port=config.port, threaded=True)


if __name__ == "__main__":
    main()
