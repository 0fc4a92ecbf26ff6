"""
Dieses Modul definiert die Hallo-Route der API. Sie liefert immer denselben Begrüßungstext als Klartext.
"""

from flask import Blueprint, Response, current_app as app

bp = Blueprint("hello", __name__)

HELLO_MESSAGE = "hello, world"


@bp.route("/hello", methods=["GET"])
def get_hello() -> Response:
    """
    Liefert die feste Begrüßung als Klartext.

    Route: /hello

    Methode: GET

    Returns:
        Response: Eine Antwort mit Statuscode 200, dem Inhalt ``hello, world`` und dem
        Content-Type ``text/plain; charset=utf-8``.

    Hinweise:
        - Anfrage-Body, Header und Query-Parameter werden ignoriert.
        - Die Antwort ist bei jedem Aufruf identisch.
    """
    app.logger.debug("Hello request received")
    response = Response(HELLO_MESSAGE, status=200, mimetype="text/plain")
    app.logger.debug("Hello response sent: %s", response.get_data(as_text=True))
    return response
