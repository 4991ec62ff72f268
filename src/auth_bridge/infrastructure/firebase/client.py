"""Firebase App Client for Auth Bridge

Manages the firebase-admin app used for account management and
custom token signing.
"""

import logging
from typing import Optional

import firebase_admin
from firebase_admin import credentials

from auth_bridge.config.settings import get_settings

logger = logging.getLogger(__name__)


class FirebaseClient:
    """firebase-admin app wrapper"""

    def __init__(self):
        self._app: Optional[firebase_admin.App] = None

    def connect(self):
        """Initialize the firebase-admin app.

        Environment Variables:
            FIREBASE_CREDENTIALS_PATH: Service account JSON file. When unset,
                Application Default Credentials are used (GOOGLE_APPLICATION_CREDENTIALS,
                or the metadata server on GCP).
            FIREBASE_PROJECT_ID: Optional project id override
        """
        if not self._app:
            settings = get_settings()

            if settings.firebase_credentials_path:
                credential = credentials.Certificate(settings.firebase_credentials_path)
                source = settings.firebase_credentials_path
            else:
                credential = credentials.ApplicationDefault()
                source = "application default credentials"

            options = {}
            if settings.firebase_project_id:
                options["projectId"] = settings.firebase_project_id

            self._app = firebase_admin.initialize_app(
                credential, options or None, name=settings.service_name
            )
            logger.info(f"Firebase app initialized from {source}")

    def disconnect(self):
        """Delete the firebase-admin app"""
        if self._app:
            firebase_admin.delete_app(self._app)
            self._app = None
            logger.info("Firebase app deleted")

    def get_app(self) -> firebase_admin.App:
        """Get the underlying firebase-admin app

        Returns:
            firebase_admin.App instance

        Raises:
            RuntimeError: If the app is not initialized
        """
        if not self._app:
            raise RuntimeError("Firebase app not initialized. Call connect() first.")
        return self._app

    def is_connected(self) -> bool:
        return self._app is not None


# Global Firebase client instance
_firebase_client: Optional[FirebaseClient] = None


def get_firebase_client() -> FirebaseClient:
    """Get or create global Firebase client

    Returns:
        Initialized FirebaseClient instance
    """
    global _firebase_client
    if not _firebase_client:
        client = FirebaseClient()
        client.connect()
        _firebase_client = client
    return _firebase_client


def close_firebase_client():
    """Close global Firebase client"""
    global _firebase_client
    if _firebase_client:
        _firebase_client.disconnect()
        _firebase_client = None


def is_firebase_ready() -> bool:
    """Report whether the global Firebase client is initialized, without connecting"""
    return _firebase_client is not None and _firebase_client.is_connected()
