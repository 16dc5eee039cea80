"""
YouTube Data API v3 client for updating video descriptions.
Handles OAuth authentication and snippet updates.
"""

import os
import json
import logging
from pathlib import Path
from typing import Callable, Optional

from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from google.auth.transport.requests import Request
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from config import DEFAULT_SCOPES


log = logging.getLogger("DescUpdater")


def _error_reason(error: HttpError) -> str:
    """Pull the first error reason out of an API error body."""
    try:
        content = json.loads(error.content.decode())
        return content.get("error", {}).get("errors", [{}])[0].get("reason", "unknown")
    except (ValueError, AttributeError, IndexError):
        return "unknown"


class YouTubeClient:
    """Handles YouTube authentication and video snippet updates."""

    def __init__(
        self,
        client_secrets_file: str = "google-credentials/client_secret.json",
        credentials_file: str = "google-credentials/credentials.json",
        scopes: Optional[list[str]] = None,
        code_input: Callable[[str], str] = input
    ):
        self.client_secrets_file = client_secrets_file
        self.credentials_file = credentials_file
        self.scopes = scopes or list(DEFAULT_SCOPES)
        self.code_input = code_input
        self.youtube = None

    def _load_credentials(self) -> Optional[Credentials]:
        if not os.path.exists(self.credentials_file):
            return None
        try:
            return Credentials.from_authorized_user_file(
                self.credentials_file, self.scopes
            )
        except Exception as e:
            log.warning(f"[YouTube] Failed to load credentials: {e}")
            return None

    def _save_credentials(self, credentials: Credentials):
        Path(self.credentials_file).parent.mkdir(parents=True, exist_ok=True)
        with open(self.credentials_file, "w") as f:
            f.write(credentials.to_json())
        log.info(f"[YouTube] Token stored to {self.credentials_file}")

    def _authorize_interactively(self) -> Optional[Credentials]:
        """
        Run the authorization-code exchange on the console.
        Prints a URL, waits for the code from that page, then trades it for a token.
        """
        if not os.path.exists(self.client_secrets_file):
            log.error(f"[YouTube] Error: {self.client_secrets_file} not found")
            log.error("[YouTube] Download from Google Cloud Console")
            return None

        flow = InstalledAppFlow.from_client_secrets_file(
            self.client_secrets_file, self.scopes
        )
        redirect_uris = flow.client_config.get("redirect_uris") or []
        if redirect_uris:
            flow.redirect_uri = redirect_uris[0]

        auth_url, _ = flow.authorization_url(access_type="offline")
        print(f"Authorize this app by visiting this url: {auth_url}")
        code = self.code_input("Enter the code from that page here: ").strip()

        try:
            flow.fetch_token(code=code)
        except Exception as e:
            log.error(f"[YouTube] Error while trying to retrieve access token: {e}")
            return None

        return flow.credentials

    def authenticate(self) -> bool:
        """
        Authenticate with YouTube API.
        Uses the stored token when present, otherwise asks for an
        authorization code on the console and stores the new token.

        Returns True if successful, False otherwise.
        """
        credentials = self._load_credentials()

        if not credentials or not credentials.valid:
            if credentials and credentials.expired and credentials.refresh_token:
                log.info("[YouTube] Refreshing expired credentials...")
                try:
                    credentials.refresh(Request())
                    self._save_credentials(credentials)
                except Exception as e:
                    log.warning(f"[YouTube] Failed to refresh: {e}")
                    credentials = None
            else:
                credentials = None

            if not credentials:
                credentials = self._authorize_interactively()
                if not credentials:
                    return False
                self._save_credentials(credentials)

        try:
            self.youtube = build("youtube", "v3", credentials=credentials)
            log.info("[YouTube] Authenticated successfully")
            return True
        except Exception as e:
            log.error(f"[YouTube] Failed to build API client: {e}")
            return False

    def get_video_snippet(self, video_id: str) -> Optional[dict]:
        """
        Fetch the snippet of a single video.
        Quota cost: 1 unit.
        """
        response = self.youtube.videos().list(
            part="snippet",
            id=video_id
        ).execute()
        items = response.get("items", [])
        if not items:
            return None
        return items[0]["snippet"]

    def update_description(
        self,
        video_id: str,
        new_description: str,
        dry_run: bool = False
    ) -> bool:
        """
        Replace a video's description, keeping its title and category.
        Quota cost: 50 units for the update call.

        Returns True if the description is up to date afterwards, False otherwise.
        """
        if not self.youtube:
            if not self.authenticate():
                return False

        try:
            snippet = self.get_video_snippet(video_id)
            if snippet is None:
                log.error(f"[YouTube] Video not found: {video_id}")
                return False

            old_description = snippet.get("description", "")
            if old_description == new_description:
                log.info("[YouTube] Description is already up to date.")
                return True

            if dry_run:
                log.info(
                    f"[YouTube] Dry run: would replace {len(old_description)} chars "
                    f"with {len(new_description)} chars"
                )
                return True

            self.youtube.videos().update(
                part="snippet",
                body={
                    "id": video_id,
                    "snippet": {
                        "title": snippet["title"],
                        "description": new_description,
                        "categoryId": snippet["categoryId"]
                    }
                }
            ).execute()

            log.info("[YouTube] Updated video description.")
            return True

        except HttpError as e:
            reason = _error_reason(e)
            if reason == "quotaExceeded":
                log.error("[YouTube] Error: Daily quota exceeded. Try again tomorrow.")
            elif reason == "forbidden":
                log.error("[YouTube] Error: This account cannot edit the video.")
            else:
                log.error(f"[YouTube] The API returned an error: {e}")
            return False

        except Exception as e:
            log.error(f"[YouTube] Update failed: {e}")
            return False


if __name__ == "__main__":
    # Test authentication (won't update anything)
    logging.basicConfig(level=logging.INFO, format='%(asctime)s | %(levelname)s | %(message)s')
    client = YouTubeClient()

    if client.authenticate():
        print("Authentication successful!")
    else:
        print("Authentication failed!")
