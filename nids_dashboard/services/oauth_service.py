# nids_dashboard/services/oauth_service.py
import secrets
from urllib.parse import urlencode
import requests
from flask import current_app, session
from .auth_service import AuthService
from ..utils.exceptions import APIError
from ..utils.logger import setup_logger

OAUTH_STATE_KEY = 'google_oauth_state'
GOOGLE_SCOPES = ('openid', 'profile', 'email')

class OAuthError(Exception):
    """Google sign-in could not be completed."""

class GoogleOAuthService:
    """Authorization-code flow against Google, ending in a local user account."""

    def __init__(self):
        self.auth_service = AuthService()
        self.logger = setup_logger()
        self.config = current_app.config

    def is_configured(self):
        return bool(self.config.get('GOOGLE_CLIENT_ID') and self.config.get('GOOGLE_CLIENT_SECRET'))

    def authorization_url(self):
        """Service: Build the Google consent URL and remember the state in the session"""
        if not self.is_configured():
            raise APIError("Google sign-in is not configured", status_code=503)

        state = secrets.token_urlsafe(32)
        session[OAUTH_STATE_KEY] = state
        params = {
            'client_id': self.config['GOOGLE_CLIENT_ID'],
            'redirect_uri': self.config['GOOGLE_CALLBACK_URL'],
            'response_type': 'code',
            'scope': ' '.join(GOOGLE_SCOPES),
            'state': state,
        }
        return f"{self.config['GOOGLE_AUTH_URL']}?{urlencode(params)}"

    def complete(self, args):
        """Service: Handle the callback query string and return the signed-in user"""
        expected_state = session.pop(OAUTH_STATE_KEY, None)
        if args.get('error'):
            raise OAuthError(f"Provider returned error: {args.get('error')}")
        if not expected_state or args.get('state') != expected_state:
            raise OAuthError("State mismatch")
        code = args.get('code')
        if not code:
            raise OAuthError("Missing authorization code")

        access_token = self._exchange_code(code)
        profile = self._fetch_profile(access_token)
        email = profile.get('email')
        if not email:
            raise OAuthError("Google profile has no email")

        try:
            user = self.auth_service.get_or_create_oauth_user(email)
        except Exception as e:
            raise OAuthError(f"Could not load account for {email}: {str(e)}") from e
        self.logger.info(f"Google sign-in completed for {email}")
        return user

    def _exchange_code(self, code):
        try:
            response = requests.post(
                self.config['GOOGLE_TOKEN_URL'],
                data={
                    'code': code,
                    'client_id': self.config['GOOGLE_CLIENT_ID'],
                    'client_secret': self.config['GOOGLE_CLIENT_SECRET'],
                    'redirect_uri': self.config['GOOGLE_CALLBACK_URL'],
                    'grant_type': 'authorization_code',
                },
                timeout=self.config['OAUTH_REQUEST_TIMEOUT'],
            )
            response.raise_for_status()
            token = response.json().get('access_token')
        except (requests.RequestException, ValueError) as e:
            raise OAuthError(f"Token exchange failed: {str(e)}") from e
        if not token:
            raise OAuthError("Token response has no access_token")
        return token

    def _fetch_profile(self, access_token):
        try:
            response = requests.get(
                self.config['GOOGLE_USERINFO_URL'],
                headers={'Authorization': f'Bearer {access_token}'},
                timeout=self.config['OAUTH_REQUEST_TIMEOUT'],
            )
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as e:
            raise OAuthError(f"Profile request failed: {str(e)}") from e
