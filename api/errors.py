from flask import jsonify, request
from werkzeug.exceptions import HTTPException
import logging

from models.errors import ErrorKind, LibraryError

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INTERNAL: 500,
}


def error_response(message: str, status: int):
    return jsonify({"error": message}), status


def register_error_handlers(app):
    # Repository, coordinator and validation failures
    @app.errorhandler(LibraryError)
    def handle_library_error(err: LibraryError):
        status = STATUS_BY_KIND[err.kind]
        if status >= 500:
            logging.exception("Internal failure on %s %s", request.method, request.path, exc_info=err)
            return error_response("Internal Server Error", status)
        logging.warning(
            "%s %s -> %s %s: %s %s",
            request.method, request.path, status, err.kind.value, err.message, err.context,
        )
        return error_response(err.message, status)

    # Unknown routes, non-integer ids in the path
    @app.errorhandler(404)
    def not_found(e):
        return error_response("Resource not found.", 404)

    # Werkzeug HTTPExceptions map to their status codes
    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        return error_response(err.description, err.code or 400)

    # 500 Internal Error (catch-all)
    @app.errorhandler(Exception)
    def internal_error(err: Exception):
        logging.exception("Unhandled exception", exc_info=err)
        return error_response("Internal Server Error", 500)
