# nids_dashboard/services/auth_service.py
from flask import current_app
from ..repositories.user_repository import UserRepository
from ..core.database import OAUTH_PASSWORD_SENTINEL, ROLE_VIEWER
from ..utils.exceptions import APIError
from ..utils.logger import setup_logger
import bcrypt

# bcrypt only reads the first 72 bytes; newer releases raise instead of truncating
BCRYPT_MAX_BYTES = 72

def password_bytes(password):
    return password.encode('utf-8')[:BCRYPT_MAX_BYTES]

class AuthService:
    def __init__(self):
        self.user_repository = UserRepository()
        self.logger = setup_logger()

    def hash_password(self, password):
        rounds = current_app.config.get('BCRYPT_ROUNDS', 10)
        return bcrypt.hashpw(password_bytes(password), bcrypt.gensalt(rounds=rounds)).decode('utf-8')

    def register(self, email, password):
        """Service: Register a new viewer account"""
        if not email or not password:
            raise APIError("Email and password are required.", status_code=400)

        if self.user_repository.get_user_by_email(email):
            self.logger.info(f"Registration rejected, email already exists: {email}")
            raise APIError("Email already exists. Please login instead.", status_code=409)

        try:
            hashed_password = self.hash_password(password)
            user = self.user_repository.create_user(email, hashed_password, ROLE_VIEWER)
            self.logger.info(f"User registered: {email}")
            return user
        except Exception as e:
            self.logger.error(f"Registration failed: {str(e)}")
            raise APIError("Registration failed. Please try again.", status_code=500)

    def authenticate(self, email, password):
        """Service: Check email/password credentials and return the user"""
        if not email or not password:
            raise APIError("Invalid email or password. Please try again.", status_code=401)

        user = self.user_repository.get_user_by_email(email)
        if not user:
            raise APIError("No account found with this email. Please register first.", status_code=404)

        if user.is_oauth_account:
            raise APIError("This account uses Google sign-in. Please continue with Google.", status_code=401)

        try:
            valid = bcrypt.checkpw(password_bytes(password), user.password.encode('utf-8'))
        except (ValueError, TypeError) as e:
            self.logger.error(f"Error comparing passwords for {email}: {str(e)}")
            raise APIError("Login failed. Please try again.", status_code=500)

        if not valid:
            self.logger.info(f"Login rejected, incorrect password: {email}")
            raise APIError("Incorrect password. Please try again.", status_code=401)

        self.logger.info(f"User authenticated: {email}")
        return user

    def get_or_create_oauth_user(self, email):
        """Service: Find the account for an OAuth email, creating a viewer on first login"""
        user = self.user_repository.get_user_by_email(email)
        if user:
            return user
        user = self.user_repository.create_user(email, OAUTH_PASSWORD_SENTINEL, ROLE_VIEWER)
        self.logger.info(f"User created from Google sign-in: {email}")
        return user

    def get_user_by_id(self, user_id):
        """Service: Get user by ID, None when the row is gone"""
        return self.user_repository.get_user_by_id(user_id)
