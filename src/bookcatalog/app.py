# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

""" Flask application factory for the book catalog """
import logging

import click
from flask import Flask, render_template
from flask.cli import with_appcontext
from flask_wtf.csrf import CSRFError, CSRFProtect
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import InternalServerError

from .composer import CatalogServerError
from .ratings_client import RatingsClient
from .store import db
from .utils.config import ENV_PREFIX, Config
from .utils.log import configure_logging
from .views import books, create_rating

# Configure logger
logger = logging.getLogger(__name__)

csrf = CSRFProtect()


def create_app(config_overrides: dict = None,
               ratings_client=None) -> Flask:
    """
    Build the web app.

    Args:
        config_overrides (dict): Settings applied on top of ``Config``
            and the ``BOOKCATALOG_*`` environment variables.
        ratings_client: Replaces the ``RatingsClient`` built from
            ``RATINGS_SERVICE_URL``, e.g. with a fake in tests.

    Returns:
        Flask: The configured application.
    """
    app = Flask(__name__)
    app.config.from_mapping(Config.constants())
    app.config.from_prefixed_env(ENV_PREFIX)
    if config_overrides:
        app.config.from_mapping(config_overrides)

    configure_logging(app.config["LOG_LEVEL"])
    logger.debug(Config.log_all_constants())

    db.init_app(app)
    csrf.init_app(app)
    csrf.exempt(create_rating)

    if ratings_client is None:
        ratings_client = RatingsClient(
            base_url=app.config["RATINGS_SERVICE_URL"],
            timeout=app.config["RATINGS_TIMEOUT_SECONDS"],
        )
    app.extensions["ratings_client"] = ratings_client

    app.register_blueprint(books)
    _register_error_handlers(app)
    app.cli.add_command(init_db_command)

    if app.config["CREATE_TABLES_ON_STARTUP"]:
        with app.app_context():
            db.create_all()

    logger.info("Book catalog ready, ratings service at %s",
                app.config["RATINGS_SERVICE_URL"])
    return app


def _server_error(e):
    logger.error("Unexpected error while serving request: %s", e, exc_info=e)
    return render_template("error.html", title="Error",
                           message="Server error"), 500


def _register_error_handlers(app: Flask):
    @app.errorhandler(404)
    def page_not_found(e):
        return render_template("error.html", title="Not Found",
                               message="Page not found"), 404

    @app.errorhandler(CSRFError)
    def csrf_rejected(e):
        logger.warning("Rejected form submission: %s", e.description)
        return render_template("error.html", title="Bad Request",
                               message="Invalid or missing form token"), 400

    app.register_error_handler(CatalogServerError, _server_error)
    app.register_error_handler(SQLAlchemyError, _server_error)
    app.register_error_handler(InternalServerError, _server_error)


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create the book store tables."""
    db.create_all()
    click.echo("Initialized the book store.")


if __name__ == '__main__':
    create_app().run(host='0.0.0.0', port=8080)
