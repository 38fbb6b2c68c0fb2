import time

from flask import Blueprint

bp = Blueprint("health", __name__)


@bp.get("/")
def health():
    """
    Health check
    ---
    tags:
      - Health
    responses:
      200:
        description: API is up
        schema:
          type: object
          properties:
            status:
              type: string
              example: ok
            timestamp:
              type: integer
              description: Server time in epoch milliseconds
    """
    return {"status": "ok", "timestamp": int(time.time() * 1000)}, 200
