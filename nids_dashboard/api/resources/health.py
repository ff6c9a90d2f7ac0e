from flask_restful import Resource
from sqlalchemy import text
from ... import db
from ...utils.logger import setup_logger

def check_db_connected():
    """Run a trivial query to verify the database is reachable."""
    try:
        db.session.execute(text("SELECT 1"))
        return True
    except Exception as e:
        db.session.rollback()
        setup_logger().error(f"Database check failed: {str(e)}")
        return False

class HealthCheck(Resource):
    def get(self):
        """Controller: Check API health & list available routes"""
        routes = {
            "message": "NIDS API Server",
            "status": "healthy",
            "database": "connected" if check_db_connected() else "disconnected",
            "routes": {
                "/": "Health check & list all routes",
                "/auth/status": "Current session user",
                "/auth/login": "Login with email and password",
                "/auth/register": "Register new viewer account",
                "/auth/logout": "End the session",
                "/auth/google": "Start Google sign-in",
                "/auth/google/callback": "Google sign-in redirect target",
                "/models": "List models (any user) or create one (admin)",
                "/models/<id>": "Get (any user), update or delete (admin) a model",
            }
        }
        return routes, 200
