"""
Standalone script to authenticate with YouTube.
Run this interactively to set up or refresh the cached token before updating descriptions.
"""

import sys
from pathlib import Path

# Add parent directory to path so we can import
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import UpdaterConfig, setup_logging
from youtube_client import YouTubeClient


def main(config_path: str = None) -> int:
    """Authenticate with YouTube interactively."""
    setup_logging()
    config = UpdaterConfig.from_file(config_path) if config_path else UpdaterConfig()

    print("=" * 60)
    print("  YouTube Authentication")
    print("=" * 60)
    print()
    print("You will get a URL to open in your browser.")
    print("Sign in with an account that can edit the channel's videos,")
    print("then paste the `code` parameter from the redirect URL here.")
    print()

    client = YouTubeClient(
        config.client_secrets_file,
        config.credentials_file,
        config.scopes
    )

    print("Starting authentication...")
    if client.authenticate():
        print()
        print("=" * 60)
        print("✓ Authentication successful!")
        print("=" * 60)
        print()
        print(f"Credentials saved to {config.credentials_file}.")
        return 0
    else:
        print()
        print("=" * 60)
        print("✗ Authentication failed")
        print("=" * 60)
        return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else None))
