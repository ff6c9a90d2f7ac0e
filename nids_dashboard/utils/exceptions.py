# nids_dashboard/utils/exceptions.py
from werkzeug.exceptions import HTTPException
from .logger import setup_logger

class APIError(HTTPException):
    """HTTP error rendered as {"error": message}.

    flask_restful renders HTTPExceptions from their ``data`` attribute, so the
    same payload comes back whether the error is raised in a Resource or in a
    plain Flask view.
    """

    def __init__(self, message, status_code=400):
        super().__init__(description=message)
        self.code = status_code
        self.message = message
        self.status_code = status_code
        self.data = self.to_dict()

    def get_headers(self, environ=None, scope=None):
        return [("Content-Type", "application/json")]

    def to_dict(self):
        return {"error": self.message}

def handle_api_error(error):
    if hasattr(error, 'to_dict'):
        return error.to_dict(), error.status_code
    if isinstance(error, HTTPException):
        return {"error": error.description}, error.code
    setup_logger().exception(f"Unhandled error: {str(error)}")
    return {"error": "Server error"}, 500
