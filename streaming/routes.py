from flask import Blueprint, Response, request, jsonify

from substitutions import registry
from streaming.session import StreamingSession
from streaming.validation import ValidationError

river = Blueprint("river", __name__)


# ================= STREAM =================
@river.route("/")
def stream():

    session = StreamingSession()

    try:
        session.validate(request.args)
    except ValidationError as e:
        return jsonify(e.to_dict()), 400

    return Response(
        session.events(),
        mimetype="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "X-Accel-Buffering": "no"
        }
    )


# ================= SUBSTITUTIONS =================
@river.route("/substitutions")
def substitutions():
    return jsonify(registry.keys())
