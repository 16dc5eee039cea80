"""
Catalog of generated video descriptions.
Reads the metadata file and groups videos with a description on disk into tracks.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable


log = logging.getLogger("DescUpdater")

CHALLENGES_SLUG = "challenges"
CHALLENGES_TITLE = "Coding Challenges"


class CatalogError(Exception):
    pass


@dataclass
class VideoDescriptor:
    video_id: str
    title: str
    slug: str
    canonical_url: str = ""
    canonical_track: str = ""

    @property
    def description_filename(self) -> str:
        return f"{self.slug}_{self.video_id}.txt"

    @classmethod
    def from_metadata(cls, data: dict) -> "VideoDescriptor":
        return cls(
            video_id=data["videoId"],
            title=data["title"],
            slug=data["slug"],
            canonical_url=data.get("canonicalURL") or "",
            canonical_track=data.get("canonicalTrack") or "",
        )


@dataclass
class Track:
    slug: str
    title: str
    videos: list[VideoDescriptor] = field(default_factory=list)

    def find_video(self, video_id: str):
        for video in self.videos:
            if video.video_id == video_id:
                return video
        return None


def list_description_files(descriptions_dir: str) -> list[str]:
    """Names of generated description files, skipping the metadata JSON."""
    path = Path(descriptions_dir)
    if not path.is_dir():
        return []
    return sorted(
        f.name for f in path.iterdir()
        if f.is_file() and not f.name.endswith("json")
    )


def video_id_from_filename(filename: str) -> str:
    """Extract the video ID from '<slug>_<videoId>.txt'."""
    stem = filename.split(".")[0]
    return "_".join(stem.split("_")[1:])


def load_metadata(metadata_file: str) -> tuple[list[Track], list[VideoDescriptor]]:
    """Load tracks and videos from the metadata file."""
    try:
        with open(metadata_file, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise CatalogError(f"Metadata file not found: {metadata_file}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Metadata file is not valid JSON: {e}") from e

    try:
        tracks = [Track(slug=t["slug"], title=t["title"]) for t in data.get("tracks", [])]
        videos = [VideoDescriptor.from_metadata(v) for v in data.get("videos", [])]
    except (KeyError, TypeError, AttributeError) as e:
        raise CatalogError(f"Malformed metadata entry: {e}") from e

    log.debug(f"[Catalog] Loaded {len(tracks)} tracks and {len(videos)} videos")
    return tracks, videos


def build_track_index(
    tracks: Iterable[Track],
    videos: Iterable[VideoDescriptor],
    available_files: Iterable[str]
) -> list[Track]:
    """
    Group videos that have a description file into tracks.

    Tracks keep metadata order and empty ones are dropped. Videos whose
    canonical URL starts with "challenges" also go into a trailing
    Coding Challenges track.
    """
    available = set(available_files)
    candidates = [v for v in videos if v.description_filename in available]

    index = []
    for track in tracks:
        track_videos = [v for v in candidates if v.canonical_track == track.slug]
        if track_videos:
            index.append(Track(track.slug, track.title, track_videos))

    challenge_videos = [
        v for v in candidates if v.canonical_url.startswith(CHALLENGES_SLUG)
    ]
    if challenge_videos:
        index.append(Track(CHALLENGES_SLUG, CHALLENGES_TITLE, challenge_videos))

    return index


def read_description(descriptions_dir: str, video: VideoDescriptor) -> str:
    path = Path(descriptions_dir) / video.description_filename
    with open(path, encoding="utf-8") as f:
        return f.read()
