# nids_dashboard/repositories/user_repository.py
from ..core.database import User, ROLE_VIEWER
from .. import db
from ..utils.logger import setup_logger

class UserRepository:
    def __init__(self):
        self.logger = setup_logger()

    def create_user(self, email, password, role=ROLE_VIEWER):
        """Repository: Create a new user"""
        try:
            user = User(email=email, password=password, role=role)
            db.session.add(user)
            db.session.commit()
            self.logger.info(f"Repository: Created user {email} with role {role}")
            return user
        except Exception as e:
            db.session.rollback()
            self.logger.error(f"Repository: Failed to create user {email}: {str(e)}")
            raise

    def get_user_by_email(self, email):
        """Repository: Get user by email"""
        try:
            return User.query.filter_by(email=email).first()
        except Exception as e:
            self.logger.error(f"Repository: Failed to get user {email}: {str(e)}")
            raise

    def get_user_by_id(self, user_id):
        """Repository: Get user by ID"""
        try:
            return db.session.get(User, user_id)
        except Exception as e:
            self.logger.error(f"Repository: Failed to get user ID {user_id}: {str(e)}")
            raise
