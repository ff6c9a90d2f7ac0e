# nids_dashboard/api/middleware.py
from functools import wraps
from flask_login import current_user
from .. import login_manager
from ..services.auth_service import AuthService
from ..utils.exceptions import APIError
from ..utils.logger import setup_logger

@login_manager.user_loader
def load_user(user_id):
    # Runs on every request, so a role change in the database applies immediately
    try:
        return AuthService().get_user_by_id(int(user_id))
    except (TypeError, ValueError):
        return None
    except Exception as e:
        setup_logger().error(f"Failed to load session user {user_id}: {str(e)}")
        raise APIError("Server error", status_code=500)

def auth_required(func):
    """Reject requests without a logged-in session with 401."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        if not current_user.is_authenticated:
            raise APIError("Unauthorized", status_code=401)
        return func(*args, **kwargs)
    return wrapper

def admin_required(func):
    """401 without a session, 403 unless the session user is an admin."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        if not current_user.is_authenticated:
            raise APIError("Unauthorized", status_code=401)
        if not current_user.is_admin:
            raise APIError("Forbidden - Admin access required", status_code=403)
        return func(*args, **kwargs)
    return wrapper
