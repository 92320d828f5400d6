import json

from playlist_api.app.models.video import Video


def make_video(name, video_id="abc", likes=0, favorite=False):
    video = Video.create(name, f"https://www.youtube.com/watch?v={video_id}")
    video.likes = likes
    video.favorite = favorite
    return video


def write_videos(path, videos):
    """Seed a data file with ``videos`` (list of ``Video``)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps([video.to_dict() for video in videos]), encoding="utf-8")
