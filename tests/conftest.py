import json

import pytest


METADATA = {
    "tracks": [
        {"slug": "noc", "title": "The Nature of Code"},
        {"slug": "p5-tutorial", "title": "Code! Programming with p5.js"},
        {"slug": "ml5", "title": "Beginners Guide to Machine Learning"},
    ],
    "videos": [
        {
            "videoId": "70MQ-FugwbI",
            "title": "Random Walker",
            "slug": "random-walker",
            "canonicalURL": "tracks/noc/random-walker",
            "canonicalTrack": "noc",
        },
        {
            "videoId": "x_y-z",
            "title": "Vectors",
            "slug": "vectors",
            "canonicalURL": "tracks/noc/vectors",
            "canonicalTrack": "noc",
        },
        {
            "videoId": "HerCR8bw_GE",
            "title": "Variables",
            "slug": "variables",
            "canonicalURL": "tracks/p5-tutorial/variables",
            "canonicalTrack": "p5-tutorial",
        },
        {
            "videoId": "17WoOqgXsRM",
            "title": "Starfield Simulation",
            "slug": "1-starfield",
            "canonicalURL": "challenges/1-starfield",
        },
    ],
}


@pytest.fixture
def descriptions_dir(tmp_path):
    """A _descriptions folder with metadata and three generated descriptions."""
    path = tmp_path / "_descriptions"
    path.mkdir()
    (path / "metadata.json").write_text(json.dumps(METADATA), encoding="utf-8")
    (path / "random-walker_70MQ-FugwbI.txt").write_text("Random walker description", encoding="utf-8")
    (path / "vectors_x_y-z.txt").write_text("Vectors description", encoding="utf-8")
    (path / "1-starfield_17WoOqgXsRM.txt").write_text("Starfield description", encoding="utf-8")
    return path
