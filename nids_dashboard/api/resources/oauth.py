# nids_dashboard/api/resources/oauth.py
from flask import current_app, redirect, request
from flask_restful import Resource
from ...services.oauth_service import GoogleOAuthService, OAuthError
from ...utils.logger import setup_logger
from .auth import start_session

class GoogleLogin(Resource):
    def get(self):
        """Controller: Send the browser to Google's consent screen"""
        return redirect(GoogleOAuthService().authorization_url())

class GoogleCallback(Resource):
    def get(self):
        """Controller: Finish Google sign-in and hand the browser back to the frontend"""
        frontend_url = current_app.config['FRONTEND_URL'].rstrip('/')
        try:
            user = GoogleOAuthService().complete(request.args)
        except OAuthError as e:
            setup_logger().error(f"Google sign-in failed: {str(e)}")
            return redirect(f"{frontend_url}/login")
        start_session(user)
        return redirect(f"{frontend_url}/dashboard")
