"""Dieses Modul enthält die zentrale Funktion zur Behandlung von Ausnahmen des Hello-Service."""

import json

from flask import Response, make_response, request, current_app as app
from werkzeug.exceptions import HTTPException, MethodNotAllowed


def error_payload(e: Exception) -> dict:
    """
    Baut die JSON-Nutzlast einer Fehlerantwort.

    Der einzige erfolgreiche Endpunkt (``GET /hello``) antwortet mit Klartext. Fehler enthalten
    deshalb den Statuscode, die Beschreibung von Werkzeug und den angefragten Pfad, damit ein Client
    einen Tippfehler (z.B. ``/hello/``) oder eine falsche Methode erkennt, ohne den Body raten zu müssen.

    Args:
        e (Exception): Die aufgetretene Ausnahme.

    Returns:
        dict: ``message``, ``code``, ``path`` und je nach Ausnahme ``description``,
        ``allowedMethods`` (nur bei 405) oder ``details`` (nur bei 500).
    """
    if isinstance(e, HTTPException):
        payload = {
            "message": e.name,
            "code": e.code,
            "description": e.description,
            "path": request.path,
        }
        if isinstance(e, MethodNotAllowed) and e.valid_methods:
            payload["allowedMethods"] = sorted(e.valid_methods)
        return payload

    return {
        "message": "unhandled exception occurred",
        "code": 500,
        "details": str(e),
        "path": request.path,
    }


def response_exception(e: Exception) -> Response:
    """
    Wandelt eine Ausnahme in eine JSON-Fehlerantwort um.

    Args:
        e (Exception): Die aufgetretene Ausnahme.

    Returns:
        Response: Eine Antwort mit JSON-Nutzlast (siehe ``error_payload``) und passendem HTTP-Statuscode.

    Verhalten:
        1. Für HTTPExceptions (z.B. 404 Not Found, 405 Method Not Allowed):
           - Übernimmt die von Werkzeug erzeugte Antwort samt Headern (z.B. ``Allow``).
           - Ersetzt den HTML-Inhalt durch die JSON-Nutzlast.
           - Protokolliert eine Warnung mit Methode und Pfad der Anfrage.
        2. Für alle anderen Ausnahmen:
           - Antwortet mit Status 500.
           - Protokolliert den Fehler samt Traceback.
    """
    payload = error_payload(e)

    if isinstance(e, HTTPException):
        response = e.get_response()
        response.set_data(f"{json.dumps(payload)}\n")
        response.content_type = "application/json"

        app.logger.warning(f"{request.method} {request.path} failed: {e.name} (code: {e.code})")
        return make_response(response, e.code)

    app.logger.error(f"{request.method} {request.path} raised {type(e).__name__}")
    app.logger.exception("Exception details:", exc_info=e)

    return make_response(payload, 500)
