"""
YouTube Description Updater
Pushes a generated description from _descriptions/ to a YouTube video.

First run asks you to open an authorization URL, sign in with an account that
can edit the channel's videos and paste back the `code` query parameter from
the redirect. The token is then cached in google-credentials/credentials.json.
"""

import json
import logging
import os
import sys
from typing import Callable, Optional

from config import UpdaterConfig, setup_logging
from descriptions import (
    CatalogError,
    Track,
    VideoDescriptor,
    build_track_index,
    list_description_files,
    load_metadata,
    read_description,
    video_id_from_filename,
)
from youtube_client import YouTubeClient


log = logging.getLogger("DescUpdater")


def prompt_choice(
    message: str,
    choices: list[tuple[str, str]],
    input_func: Callable[[str], str] = input
) -> str:
    """
    Show a numbered menu and return the value of the picked (name, value) entry.
    Keeps asking until a valid number is entered.
    """
    print(message)
    for i, (name, _) in enumerate(choices, start=1):
        print(f"  {i}. {name}")

    while True:
        answer = input_func(f"Enter a number (1-{len(choices)}): ").strip()
        if answer.isdigit() and 1 <= int(answer) <= len(choices):
            return choices[int(answer) - 1][1]
        print(f"Invalid choice: {answer!r}")


class DescriptionUpdater:
    """Walks through picking a video and updating its description."""

    def __init__(
        self,
        config: UpdaterConfig,
        client: Optional[YouTubeClient] = None,
        input_func: Callable[[str], str] = input
    ):
        self.config = config
        self.input_func = input_func
        self.client = client or YouTubeClient(
            config.client_secrets_file,
            config.credentials_file,
            config.scopes,
            code_input=input_func
        )

    def load_tracks(self) -> Optional[list[Track]]:
        """Build the track index from the description files on disk."""
        files = list_description_files(self.config.descriptions_dir)
        if not files:
            log.error(
                "[Updater] No generated descriptions available. "
                "Try generating them first by using the yt-desc script."
            )
            return None

        try:
            tracks, videos = load_metadata(self.config.metadata_file)
        except CatalogError as e:
            log.error(f"[Catalog] {e}")
            return None

        known_ids = {v.video_id for v in videos}
        for name in files:
            if video_id_from_filename(name) not in known_ids:
                log.warning(f"[Catalog] No metadata for description file: {name}")

        index = build_track_index(tracks, videos, files)
        if not index:
            log.error("[Updater] None of the description files match a video in the metadata")
            return None

        log.info(f"[Catalog] Found {sum(len(t.videos) for t in index)} video(s) in {len(index)} track(s)")
        return index

    def select_video(self, tracks: list[Track]) -> VideoDescriptor:
        track_slug = prompt_choice(
            "Select a track to update:",
            [(track.title, track.slug) for track in tracks],
            self.input_func
        )
        track = next(t for t in tracks if t.slug == track_slug)

        video_id = prompt_choice(
            "Select a video to update:",
            [(f"{video.title} ({video.video_id})", video.video_id) for video in track.videos],
            self.input_func
        )
        return track.find_video(video_id)

    def run(self, dry_run: bool = False) -> int:
        """
        Run the whole update flow.

        Returns a process exit status.
        """
        if not os.path.exists(self.config.client_secrets_file):
            log.error(f"[Updater] Error loading client secret file: {self.config.client_secrets_file} not found")
            return 1

        if not self.client.authenticate():
            log.error("[Updater] YouTube authorization failed")
            return 1

        tracks = self.load_tracks()
        if not tracks:
            return 1

        video = self.select_video(tracks)
        log.info(f"[Updater] Updating description for video... {video.title} ({video.video_id})")

        try:
            new_description = read_description(self.config.descriptions_dir, video)
        except (OSError, UnicodeDecodeError) as e:
            log.error(f"[Updater] Error reading description file {video.description_filename}: {e}")
            return 1

        if not self.client.update_description(video.video_id, new_description, dry_run=dry_run):
            return 1
        return 0

    def print_index(self) -> int:
        tracks = self.load_tracks()
        if not tracks:
            return 1
        for track in tracks:
            print(f"{track.title} [{track.slug}]")
            for video in track.videos:
                print(f"  - {video.title} ({video.video_id})")
        return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Update a YouTube video description from _descriptions/")
    parser.add_argument(
        "--config",
        help="Path to a JSON config file"
    )
    parser.add_argument(
        "--descriptions-dir",
        help="Directory with generated descriptions (default: _descriptions)"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List videos with generated descriptions and exit"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Compare descriptions but don't update anything"
    )
    parser.add_argument(
        "--log-file",
        help="Also write logs to this file"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose, log_file=args.log_file)

    if args.config:
        try:
            config = UpdaterConfig.from_file(args.config, descriptions_dir=args.descriptions_dir)
        except (OSError, json.JSONDecodeError) as e:
            log.error(f"[Updater] Error loading config file {args.config}: {e}")
            return 1
    elif args.descriptions_dir:
        config = UpdaterConfig(descriptions_dir=args.descriptions_dir)
    else:
        config = UpdaterConfig()

    updater = DescriptionUpdater(config)

    try:
        if args.list:
            return updater.print_index()
        return updater.run(dry_run=args.dry_run)
    except (KeyboardInterrupt, EOFError):
        print("\n[Updater] Cancelled.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
