import pytest

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


def test_list_description_files_skips_json(descriptions_dir):
    assert list_description_files(str(descriptions_dir)) == [
        "1-starfield_17WoOqgXsRM.txt",
        "random-walker_70MQ-FugwbI.txt",
        "vectors_x_y-z.txt",
    ]


def test_list_description_files_missing_dir(tmp_path):
    assert list_description_files(str(tmp_path / "nope")) == []


def test_video_id_from_filename_keeps_underscores():
    assert video_id_from_filename("vectors_x_y-z.txt") == "x_y-z"
    assert video_id_from_filename("random-walker_70MQ-FugwbI.txt") == "70MQ-FugwbI"


def test_load_metadata(descriptions_dir):
    tracks, videos = load_metadata(str(descriptions_dir / "metadata.json"))
    assert [t.slug for t in tracks] == ["noc", "p5-tutorial", "ml5"]
    assert videos[0] == VideoDescriptor(
        video_id="70MQ-FugwbI",
        title="Random Walker",
        slug="random-walker",
        canonical_url="tracks/noc/random-walker",
        canonical_track="noc",
    )
    assert videos[3].canonical_track == ""


def test_load_metadata_missing_file(tmp_path):
    with pytest.raises(CatalogError):
        load_metadata(str(tmp_path / "metadata.json"))


def test_load_metadata_bad_json(tmp_path):
    path = tmp_path / "metadata.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(CatalogError):
        load_metadata(str(path))


def test_load_metadata_missing_field(tmp_path):
    path = tmp_path / "metadata.json"
    path.write_text('{"tracks": [], "videos": [{"title": "No id"}]}', encoding="utf-8")
    with pytest.raises(CatalogError):
        load_metadata(str(path))


def test_track_index_groups_available_videos(descriptions_dir):
    tracks, videos = load_metadata(str(descriptions_dir / "metadata.json"))
    index = build_track_index(tracks, videos, list_description_files(str(descriptions_dir)))

    assert [t.slug for t in index] == ["noc", "challenges"]
    assert [v.video_id for v in index[0].videos] == ["70MQ-FugwbI", "x_y-z"]


def test_track_index_challenges_track(descriptions_dir):
    tracks, videos = load_metadata(str(descriptions_dir / "metadata.json"))
    index = build_track_index(tracks, videos, list_description_files(str(descriptions_dir)))

    challenges = index[-1]
    assert challenges.title == "Coding Challenges"
    assert [v.video_id for v in challenges.videos] == ["17WoOqgXsRM"]


def test_track_index_drops_empty_tracks():
    tracks = [Track("noc", "Nature of Code"), Track("empty", "Empty")]
    videos = [VideoDescriptor("abc", "Walker", "walker", "tracks/noc/walker", "noc")]
    index = build_track_index(tracks, videos, ["walker_abc.txt"])
    assert [t.slug for t in index] == ["noc"]


def test_track_index_requires_matching_description_file():
    tracks = [Track("noc", "Nature of Code")]
    videos = [VideoDescriptor("abc", "Walker", "walker", "tracks/noc/walker", "noc")]
    assert build_track_index(tracks, videos, ["other-slug_abc.txt"]) == []


def test_track_index_without_challenges():
    tracks = [Track("noc", "Nature of Code")]
    videos = [VideoDescriptor("abc", "Walker", "walker", "tracks/noc/walker", "noc")]
    index = build_track_index(tracks, videos, ["walker_abc.txt"])
    assert all(t.slug != "challenges" for t in index)


def test_read_description(descriptions_dir):
    video = VideoDescriptor("x_y-z", "Vectors", "vectors")
    assert read_description(str(descriptions_dir), video) == "Vectors description"


def test_find_video():
    video = VideoDescriptor("abc", "Walker", "walker")
    track = Track("noc", "Nature of Code", [video])
    assert track.find_video("abc") is video
    assert track.find_video("zzz") is None
