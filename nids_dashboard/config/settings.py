# nids_dashboard/config/settings.py
import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()

# Development-only session signing key; create_app refuses it outside debug/testing
DEFAULT_SECRET_KEY = 'dev-secret-key-change-me'

class Config:
    BASE_DIR = os.path.abspath(os.path.dirname(__file__))
    LOGS_PATH = os.getenv('LOGS_PATH', os.path.join(BASE_DIR, '../../logs'))

    # MySQL configuration from .env
    MYSQL_HOST = os.getenv('MYSQL_HOST', 'localhost')
    MYSQL_PORT = os.getenv('MYSQL_PORT', '3306')
    MYSQL_USER = os.getenv('MYSQL_USER', 'root')
    MYSQL_PASSWORD = os.getenv('MYSQL_PASSWORD', '')
    MYSQL_DATABASE = os.getenv('MYSQL_DATABASE', 'nids_dashboard')

    # DATABASE_URL wins over the MySQL parts (e.g. postgresql://... or sqlite:///...)
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL') or (
        f"mysql+pymysql://{MYSQL_USER}:{MYSQL_PASSWORD}@{MYSQL_HOST}:{MYSQL_PORT}/{MYSQL_DATABASE}"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    ERROR_404_HELP = False

    SECRET_KEY = os.getenv('SECRET_KEY', DEFAULT_SECRET_KEY)
    DEBUG = os.getenv('FLASK_DEBUG', 'True') == 'True'
    PORT = int(os.getenv('PORT', 3000))

    # Session cookie
    PERMANENT_SESSION_LIFETIME = timedelta(days=1)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SECURE = os.getenv('SESSION_COOKIE_SECURE', 'False') == 'True'

    FRONTEND_URL = os.getenv('FRONTEND_URL', 'http://localhost:5173')

    # Google OAuth
    GOOGLE_CLIENT_ID = os.getenv('GOOGLE_CLIENT_ID')
    GOOGLE_CLIENT_SECRET = os.getenv('GOOGLE_CLIENT_SECRET')
    GOOGLE_CALLBACK_URL = os.getenv('GOOGLE_CALLBACK_URL', 'http://localhost:3000/auth/google/callback')
    GOOGLE_AUTH_URL = 'https://accounts.google.com/o/oauth2/v2/auth'
    GOOGLE_TOKEN_URL = 'https://oauth2.googleapis.com/token'
    GOOGLE_USERINFO_URL = 'https://www.googleapis.com/oauth2/v3/userinfo'
    OAUTH_REQUEST_TIMEOUT = float(os.getenv('OAUTH_REQUEST_TIMEOUT', 10))

    BCRYPT_ROUNDS = int(os.getenv('BCRYPT_ROUNDS', 10))
    VALIDATE_METRIC_RANGE = os.getenv('VALIDATE_METRIC_RANGE', 'True') == 'True'
