from flask import Flask
from flask_restful import Api
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_cors import CORS
from .config.settings import Config, DEFAULT_SECRET_KEY
from .utils.logger import setup_logger
from .utils.exceptions import handle_api_error

db = SQLAlchemy()
login_manager = LoginManager()

class SessionApi(Api):
    def unauthorized(self, response):
        # Identity comes from the session cookie, so no Basic auth challenge
        return response

def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    logger = setup_logger()

    # Sessions may only be signed with the published development key in debug or testing
    if not app.config.get('SECRET_KEY') or app.config['SECRET_KEY'] == DEFAULT_SECRET_KEY:
        if not (app.config.get('DEBUG') or app.config.get('TESTING')):
            raise RuntimeError("SECRET_KEY must be set when FLASK_DEBUG is off")
        logger.warning("SECRET_KEY is not set; using the development key")

    # Initialize CORS; the frontend sends the session cookie cross-origin
    CORS(app, resources={r"/*": {"origins": [app.config['FRONTEND_URL']]}}, supports_credentials=True)

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    api = SessionApi(app)

    logger.info("Initializing NIDS dashboard backend")

    # Register error handler
    app.errorhandler(Exception)(handle_api_error)

    # Register API resources
    from .api import middleware  # noqa: F401  registers the session user loader
    from .api.resources.health import HealthCheck
    from .api.resources.auth import AuthStatus, Login, Register, Logout
    from .api.resources.oauth import GoogleLogin, GoogleCallback
    from .api.resources.model import ModelList, ModelDetail

    api.add_resource(HealthCheck, '/')
    api.add_resource(AuthStatus, '/auth/status')
    api.add_resource(Login, '/auth/login')
    api.add_resource(Register, '/auth/register')
    api.add_resource(Logout, '/auth/logout')
    api.add_resource(GoogleLogin, '/auth/google')
    api.add_resource(GoogleCallback, '/auth/google/callback')
    api.add_resource(ModelList, '/models')
    api.add_resource(ModelDetail, '/models/<int:model_id>')

    # Initialize database
    with app.app_context():
        db.create_all()

    return app
