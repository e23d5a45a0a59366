"""A small chat endpoint that greets, says goodbye or echoes messages."""

from __future__ import annotations

import random

from flask import Flask, Response, jsonify, request

GREETING_WORDS = frozenset({"hey", "hello", "hi"})
FAREWELL_WORDS = frozenset({"goodbye", "bye", "see you", "byebye"})

GREETINGS = (
    "Hey! How are you?",
    "Hello there!",
    "Hi! What's up?",
    "Hey! Nice to see you!",
    "Hello! How's your day going?",
)
FAREWELLS = (
    "Goodbye! Take care!",
    "See you later!",
    "Bye! Have a great day!",
    "Until next time!",
    "Take care, come back soon!",
)

HOST = "127.0.0.1"
PORT = 8081


def reply(message: str, rng: random.Random | None = None) -> str:
    """Return the chat response to ``message``."""
    source = rng if rng is not None else random
    word = message.lower()
    if word in GREETING_WORDS:
        return source.choice(GREETINGS)
    if word in FAREWELL_WORDS:
        return source.choice(FAREWELLS)
    return f" {message}"


def _allow_any_origin(response: Response) -> Response:
    origin = request.headers.get("Origin")
    response.headers["Access-Control-Allow-Origin"] = origin or "*"
    response.headers["Access-Control-Allow-Methods"] = "*"
    response.headers["Access-Control-Allow-Headers"] = (
        request.headers.get("Access-Control-Request-Headers") or "*"
    )
    return response


def create_app() -> Flask:
    """Build the web application serving the chat endpoint at ``/``."""
    app = Flask(__name__)
    app.after_request(_allow_any_origin)

    @app.post("/")
    def handle_input():
        payload = request.get_json(silent=True)
        message = payload.get("message") if isinstance(payload, dict) else None
        if not isinstance(message, str):
            return jsonify(error="expected a JSON object with a string 'message'"), 400
        return jsonify(response=reply(message))

    return app


def main(argv: list[str] | None = None) -> int:
    """Serve the chat endpoint on localhost."""
    print(f"Starting kiskyv1 server at http://localhost:{PORT}")
    create_app().run(host=HOST, port=PORT)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())