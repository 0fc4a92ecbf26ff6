"""Hauptanwendungsdatei für den Hello-Service.

Diese Datei richtet die Flask-Anwendung ein und konfiguriert sie, einschließlich:

- Einstellungen aus ``settings.json``
- Logging-Konfiguration
- Routenregistrierung
- Fehlerbehandlung

Funktionen:
    - setup_logging: Konfiguriert das Logging für die Flask-Anwendung.
    - create_app: Erstellt und konfiguriert die Flask-Anwendung.
    - main: Startet den Entwicklungsserver.

Die Anwendung kann als eigenständiger Server ausgeführt oder importiert und mit einem
WSGI-Server verwendet werden (``hello_service.app:app``).

Verwendung:
    python -m hello_service.app [--host HOST] [--port PORT] [--debug]

Umgebungsvariablen:
    PORT: Die Portnummer, auf der die Flask-App laufen soll (Standard: aus settings.json, sonst 8080)
"""

import argparse
import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Sequence

from flask import Flask, current_app

from hello_service.api.exception_handler import response_exception
from hello_service.api.routes import hello_routes
from hello_service.settings_loader import SettingsLoader

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080

LOG_FORMAT = "%(asctime)s\t%(levelname)s\t(TID %(thread)d %(threadName)s)\t%(funcName)s:%(lineno)d\t%(message)s"


def setup_logging(
        flask_app: Flask,
        log_dir: str = "logs",
        log_file: str = "log.log",
        max_bytes: int = 10240,
        backup_count: int = 10,
        level: str = "INFO",
) -> RotatingFileHandler:
    """Richtet das Logging für die Flask-Anwendung ein.

    Args:
        flask_app (Flask): Die Flask-Anwendungsinstanz.
        log_dir (str): Verzeichnis der Logdatei, wird bei Bedarf angelegt.
        log_file (str): Name der Logdatei.
        max_bytes (int): Maximale Größe einer Logdatei vor der Rotation.
        backup_count (int): Anzahl der aufbewahrten rotierten Dateien.
        level (str): Loglevel außerhalb des Debug-Modus.

    Returns:
        RotatingFileHandler: Der angehängte File-Handler.

    Ein bereits vorhandener RotatingFileHandler am Logger wird geschlossen und ersetzt, da alle
    Instanzen dieser Anwendung denselben Logger teilen.
    """
    if flask_app.debug:
        flask_app.logger.setLevel(logging.DEBUG)
    else:
        flask_app.logger.setLevel(str(level).upper())

    if not Path(log_dir).exists():
        Path(log_dir).mkdir(parents=True)

    for handler in list(flask_app.logger.handlers):
        if isinstance(handler, RotatingFileHandler):
            flask_app.logger.removeHandler(handler)
            handler.close()

    file_handler = RotatingFileHandler(
        Path(log_dir) / log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    file_handler.setLevel(flask_app.logger.level)
    flask_app.logger.addHandler(file_handler)
    return file_handler


def create_app(settings_file: str = "settings.json") -> Flask:
    """Erstellt und konfiguriert die Flask-Anwendung.

    Args:
        settings_file (str): Name oder Pfad der Einstellungsdatei.

    Returns:
        Flask: Die konfigurierte Flask-Anwendungsinstanz.

    Diese Funktion führt die folgenden Schritte aus:
        1. Erstellt eine neue Flask-Anwendungsinstanz
        2. Lädt die Anwendungseinstellungen
        3. Richtet das Logging ein
        4. Registriert den Blueprint der Hallo-Route
        5. Richtet einen globalen Fehlerhandler ein
    """
    flask_app = Flask(__name__)

    settings = SettingsLoader(flask_app=flask_app, settings_file=settings_file)
    flask_app.debug = bool(settings.get("serverSettings", "debug", default=False))

    setup_logging(
        flask_app,
        log_dir=settings.get("loggingSettings", "logDirectory", default="logs"),
        log_file=settings.get("loggingSettings", "logFileName", default="log.log"),
        max_bytes=int(settings.get("loggingSettings", "maxBytes", default=10240)),
        backup_count=int(settings.get("loggingSettings", "backupCount", default=10)),
        level=settings.get("loggingSettings", "level", default="INFO"),
    )

    flask_app.logger.info("Starting to create Flask app")

    flask_app.logger.debug("Registering blueprints")
    flask_app.register_blueprint(hello_routes.bp)
    flask_app.logger.debug("Blueprints registered")

    @flask_app.errorhandler(Exception)
    def error_handler(e):
        """Globaler Fehlerhandler."""
        current_app.logger.debug(f"Handling exception: {e!r}")
        return response_exception(e)

    flask_app.config["settings"] = settings

    flask_app.logger.info("Flask app creation completed")

    return flask_app


app = create_app()


def resolve_port(cli_port: Optional[int], settings: SettingsLoader) -> int:
    """Ermittelt den Port: Kommandozeile, dann ``PORT``, dann ``serverSettings.port``, sonst 8080."""
    if cli_port is not None:
        return cli_port
    env_port = os.environ.get("PORT")
    if env_port:
        return int(env_port)
    return int(settings.get("serverSettings", "port", default=DEFAULT_PORT))


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Serve the hello endpoint.")
    parser.add_argument("--host", default=None, help="Interface to bind")
    parser.add_argument("--port", type=int, default=None, help="Port to bind")
    parser.add_argument("--debug", action="store_true", help="Run in debug mode")
    args = parser.parse_args(argv)

    settings = app.config["settings"]
    host = args.host or settings.get("serverSettings", "host", default=DEFAULT_HOST)
    port = resolve_port(args.port, settings)
    app.logger.info(f"Starting Flask app on {host}:{port}")
    app.run(host=host, port=port, debug=args.debug or app.debug)


if __name__ == "__main__":
    main()
