# tests/conftest.py
import pytest
from nids_dashboard import create_app
from nids_dashboard.config.settings import Config
from nids_dashboard.core.database import ROLE_ADMIN, ROLE_VIEWER
from nids_dashboard.services.auth_service import AuthService

class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SECRET_KEY = 'test-secret-key'
    BCRYPT_ROUNDS = 4
    FRONTEND_URL = 'http://frontend.test'
    GOOGLE_CLIENT_ID = 'test-client-id'
    GOOGLE_CLIENT_SECRET = 'test-client-secret'
    GOOGLE_CALLBACK_URL = 'http://localhost/auth/google/callback'
    VALIDATE_METRIC_RANGE = True

@pytest.fixture
def app():
    return create_app(TestConfig)

@pytest.fixture
def client(app):
    return app.test_client()

@pytest.fixture
def make_user(app):
    """Insert a user with a bcrypt password straight into the database."""
    def _make_user(email, password='secret123', role=ROLE_VIEWER):
        with app.app_context():
            service = AuthService()
            user = service.user_repository.create_user(email, service.hash_password(password), role)
            return user.id
    return _make_user

def login(client, email, password='secret123'):
    return client.post('/auth/login', json={'email': email, 'password': password})

@pytest.fixture
def login_as():
    return login

@pytest.fixture
def admin_client(app, make_user):
    make_user('admin@example.com', role=ROLE_ADMIN)
    client = app.test_client()
    assert login(client, 'admin@example.com').status_code == 200
    return client

@pytest.fixture
def viewer_client(app, make_user):
    make_user('viewer@example.com', role=ROLE_VIEWER)
    client = app.test_client()
    assert login(client, 'viewer@example.com').status_code == 200
    return client

@pytest.fixture
def sample_model():
    return {
        'model_name': 'Random Forest Classifier',
        'framework': 'Scikit-learn',
        'accuracy': 0.9523,
        'precision': 0.9412,
        'recall': 0.9387,
        'f1_score': 0.9399,
    }
