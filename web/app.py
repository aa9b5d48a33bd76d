from dotenv import load_dotenv
load_dotenv()

import errno
import signal
import socket
import sys
from typing import Optional, Tuple
from flask import Flask
from flask_cors import CORS
from flask_restful import Api
from pymongo.collection import Collection
from werkzeug.serving import BaseWSGIServer, make_server

from booktoggle.api.toggle_api import ControlPanel, ToggleOff, ToggleOn, ToggleStatus
from booktoggle.config.settings import ToggleSettings, load_settings
from booktoggle.db.mongo_client import get_mongo_client
from booktoggle.exceptions.exceptions import ConfigurationError, StoreError
from booktoggle.logging_logs.log_config import get_logger, setup_logging
from booktoggle.repositories.collection_repo import BookCollectionRepo
from booktoggle.repositories.seed_repo import SeedFileSource
from booktoggle.services.toggle_controller import ToggleController

logger = get_logger("app")


class ToggleFlask(Flask):
    """Flask app owning the process-wide MongoDB client and the toggle controller."""

    def __init__(self, *args, settings: ToggleSettings, collection: Optional[Collection] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.settings = settings

        self.client = None
        if collection is None:
            self.client = get_mongo_client(settings.mongo_uri)
            collection = self.client[settings.db_name][settings.collection_name]

        self.collection_repo = BookCollectionRepo(collection)
        self.controller = ToggleController(self.collection_repo, SeedFileSource(settings.seed_file))

    def add_api(self):
        api = Api(self, catch_all_404s=True)
        controller_kwargs = {"controller": self.controller}
        api.add_resource(ControlPanel, "/")
        api.add_resource(ToggleStatus, "/status", resource_class_kwargs=controller_kwargs)
        api.add_resource(ToggleOn, "/on", resource_class_kwargs=controller_kwargs)
        api.add_resource(ToggleOff, "/off", resource_class_kwargs=controller_kwargs)

    def connect_store(self):
        """Fail fast when MongoDB is unreachable"""
        self.collection_repo.ping()
        logger.info(f"Connected to MongoDB ({self.settings.db_name}.{self.settings.collection_name})")

    def close_store(self):
        if self.client is not None:
            self.client.close()
            self.client = None
            logger.info("MongoDB client closed")


def create_app(settings: ToggleSettings, collection: Optional[Collection] = None) -> ToggleFlask:
    app = ToggleFlask(__name__, settings=settings, collection=collection)
    app.add_api()
    CORS(app)
    return app


LISTEN_BACKLOG = 128


def listen_socket(host: str, port: int) -> socket.socket:
    """Bind and listen on host:port. Raises OSError (EADDRINUSE when the port is taken)."""
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(LISTEN_BACKLOG)
    except OSError:
        sock.close()
        raise
    return sock


def bind_server(app: Flask, host: str, port: int, max_attempts: int) -> Tuple[BaseWSGIServer, int]:
    """Bind a threaded WSGI server, moving to the next port while the current one is taken."""
    for attempt in range(max_attempts):
        current_port = port + attempt
        try:
            sock = listen_socket(host, current_port)
        except OSError as e:
            if e.errno == errno.EADDRINUSE:
                logger.warning(f"Port {current_port} in use, trying {current_port + 1}...")
                continue
            raise ConfigurationError(f"Failed to start server: {e}") from e

        try:
            server = make_server(host, current_port, app, threaded=True, fd=sock.fileno())
        finally:
            # make_server duplicates the descriptor and skips its own bind, which would sys.exit on a busy port
            sock.close()
        return server, current_port

    raise ConfigurationError(f"Could not start server after {max_attempts} attempts, exiting.")


def _handle_shutdown_signal(signum, frame):
    raise KeyboardInterrupt


def main():
    setup_logging()

    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    app = create_app(settings)
    try:
        app.connect_store()
        server, port = bind_server(app, settings.host, settings.port, settings.port_retry_attempts)
    except StoreError as e:
        logger.error(f"Failed to connect to DB: {e}")
        app.close_store()
        sys.exit(1)
    except ConfigurationError as e:
        logger.error(str(e))
        app.close_store()
        sys.exit(1)

    signal.signal(signal.SIGTERM, _handle_shutdown_signal)
    logger.info(f"Server running on http://localhost:{port}")
    try:
        # werkzeug swallows KeyboardInterrupt (SIGINT/SIGTERM) and closes the socket
        server.serve_forever()
    finally:
        logger.info("Shutting down...")
        app.close_store()


if __name__ == '__main__':
    main()
