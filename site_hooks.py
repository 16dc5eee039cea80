"""
Data-shaping helpers for the static site.
Builds image lookups, parses tag filters from URL paths and filters videos.
"""

from typing import Any, Optional, Sequence, Union


DEFAULT_FILTER = "lang:all+topic:all"
ALL = "all"


class TagFilterError(ValueError):
    """Raised when a tag filter segment cannot be parsed."""


# Single-slot memo: (nodes, key_property, result) of the last call
_image_index_memo: Optional[tuple] = None


def _image_data(node: dict) -> Any:
    return node["childImageSharp"]["gatsbyImageData"]


def build_image_index(nodes: Sequence[dict], key_property: str = "name") -> dict:
    """
    Takes a list of image nodes and makes a lookup keyed by one of their properties.

    Later nodes overwrite earlier ones that share a key. Calling again with the
    same nodes object and key returns the same dict.
    """
    global _image_index_memo

    if _image_index_memo is not None:
        last_nodes, last_key, last_result = _image_index_memo
        if last_nodes is nodes and last_key == key_property:
            return last_result

    images = {}
    for node in nodes:
        images[node[key_property]] = _image_data(node)

    _image_index_memo = (nodes, key_property, images)
    return images


def _filter_values(filters) -> tuple[Optional[str], Optional[str]]:
    if filters is None:
        return None, None
    if isinstance(filters, dict):
        return filters.get("language"), filters.get("topic")
    language, topic = filters
    return language, topic


def filter_videos(
    videos: list[dict],
    filters: Union[tuple, dict, None] = None
) -> list[dict]:
    """
    Filter videos by language and topic.

    `filters` is a (language, topic) pair or a dict with those keys. "all"
    or None means no constraint. With no constraint the input list itself
    is returned.
    """
    language, topic = _filter_values(filters)
    if language == ALL:
        language = None
    if topic == ALL:
        topic = None

    if language is None and topic is None:
        return videos

    return [
        video for video in videos
        if (language is None or language in video.get("languages", []))
        and (topic is None or topic in video.get("topics", []))
    ]


def _split_tag(part: str, expected: str, token: str) -> str:
    name, sep, value = part.partition(":")
    if not sep or name != expected:
        raise TagFilterError(
            f"Invalid tag filter '{token}': expected '{expected}:<value>', got '{part}'"
        )
    if ":" in value:
        raise TagFilterError(
            f"Invalid tag filter '{token}': value of '{expected}' must not contain ':'"
        )
    return value


def parse_selected_tags(pathname: str) -> tuple[str, str]:
    """
    Get the selected (language, topic) pair from a page path.

    The filter lives in the third path segment, e.g.
    /x/y/lang:en+topic:math. Paths without it give ("all", "all").
    """
    path = pathname.replace("%20", " ", 1)
    if path.startswith("/"):
        path = path[1:]
    segments = path.split("/")
    segment = segments[2] if len(segments) > 2 else ""
    token = segment if "+" in segment else DEFAULT_FILTER

    parts = token.split("+")
    if len(parts) != 2:
        raise TagFilterError(
            f"Invalid tag filter '{token}': expected 'lang:<value>+topic:<value>'"
        )

    language = _split_tag(parts[0], "lang", token)
    topic = _split_tag(parts[1], "topic", token)
    return language, topic
