# nids_dashboard/api/resources/auth.py
from flask import request, session
from flask_restful import Resource, reqparse
from flask_login import current_user, login_user, logout_user
from ...services.auth_service import AuthService
from ...utils.exceptions import APIError
from ...utils.logger import setup_logger

def credentials_parser():
    # JSON from the dashboard, urlencoded from plain HTML forms
    location = 'json' if request.is_json else 'form'
    parser = reqparse.RequestParser()
    parser.add_argument('email', type=str, location=location)
    parser.add_argument('password', type=str, location=location)
    return parser

def start_session(user):
    session.permanent = True
    login_user(user)

class AuthStatus(Resource):
    def get(self):
        """Controller: Report whether the session holds a user"""
        if current_user.is_authenticated:
            return {"authenticated": True, "user": current_user.to_dict()}, 200
        return {"authenticated": False}, 200

class Login(Resource):
    def post(self):
        """Controller: Log in with email and password"""
        args = credentials_parser().parse_args()
        try:
            user = AuthService().authenticate(args['email'], args['password'])
            start_session(user)
            return {"message": "Login successful", "user": user.to_dict()}, 200
        except APIError:
            raise
        except Exception as e:
            setup_logger().error(f"Login failed: {str(e)}")
            raise APIError("Login failed. Please try again.", status_code=500)

class Register(Resource):
    def post(self):
        """Controller: Register a viewer account and log it in"""
        args = credentials_parser().parse_args()
        try:
            user = AuthService().register(args['email'], args['password'])
            start_session(user)
            return {"message": "Registration successful", "user": user.to_dict()}, 201
        except APIError:
            raise
        except Exception as e:
            setup_logger().error(f"Registration failed: {str(e)}")
            raise APIError("Registration failed. Please try again.", status_code=500)

class Logout(Resource):
    def post(self):
        """Controller: Drop the session user"""
        try:
            logout_user()
            return {"message": "Logout successful"}, 200
        except Exception as e:
            setup_logger().error(f"Logout failed: {str(e)}")
            raise APIError("Logout failed", status_code=500)
