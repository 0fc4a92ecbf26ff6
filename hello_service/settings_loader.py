import json
from pathlib import Path
from typing import Any

from flask import Flask

PACKAGE_DIR = Path(__file__).resolve().parent


class SettingsLoader:
    """
    Eine Klasse zum Laden und Zugreifen auf Einstellungen aus einer JSON-Datei.

    Relative Dateinamen werden gegenüber dem Paketverzeichnis aufgelöst, absolute Pfade
    werden unverändert übernommen.

    Attribute:
        - logger (logging.Logger): Logger der aktuellen App.
        - settings_path (Path): Der Pfad zur Einstellungsdatei.
        - settings (dict): Die geladenen Einstellungen.
    """

    def __init__(self, flask_app: Flask, settings_file: str = "settings.json") -> None:
        """
        Initialisiert den SettingsLoader.

        Args:
            flask_app: Die Flask-Anwendungsinstanz.
            settings_file: Name oder Pfad der Einstellungsdatei. Standardmäßig "settings.json".
        """
        self.logger = flask_app.logger
        self.logger.debug(f"Initializing SettingsLoader with file: {settings_file}")
        self.settings_path = PACKAGE_DIR / settings_file
        self.logger.debug(f"Full settings path: {self.settings_path}")
        self.settings = self.load_settings()

    def load_settings(self) -> dict:
        """
        Lädt Einstellungen aus der JSON-Datei.

        Returns:
            settings: Die geladenen Einstellungen oder ein leeres Dict, wenn die Datei nicht gefunden oder ungültig ist.
        """
        self.logger.debug(f"Attempting to load settings from: {self.settings_path}")
        try:
            with open(self.settings_path, encoding="utf-8") as f:
                settings = json.load(f)
        except FileNotFoundError:
            self.logger.error(f"Settings file not found: {self.settings_path}")
            return {}
        except json.JSONDecodeError:
            self.logger.error(f"Invalid JSON in settings file: {self.settings_path}")
            return {}

        if not isinstance(settings, dict):
            self.logger.error(f"Settings file does not contain an object: {self.settings_path}")
            return {}

        self.logger.debug(f"Loaded {len(settings)} top-level keys")
        return settings

    def get(self, *keys, default: Any = None) -> Any:
        """
        Ruft einen Wert aus den Einstellungen ab, unter Verwendung verschachtelter Schlüssel.

        Args:
            keys (Any): Schlüssel zum Zugriff auf verschachtelte Dictionaries.
            default (Any): Rückgabewert, wenn einer der Schlüssel fehlt.

        Returns:
            Der Wert, der mit den gegebenen Schlüsseln verknüpft ist, oder ``default``.
        """
        value = self.settings
        for key in keys:
            if not isinstance(value, dict) or key not in value:
                self.logger.warning(f"Setting not found for keys: {keys}")
                return default
            value = value[key]

        self.logger.debug(f"Successfully retrieved setting for keys: {keys}")
        return value
