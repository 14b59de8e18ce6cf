"""Text rendering of library results."""

from vidplay.results import Outcome, Result

SEARCH_PROMPT = (
    "Would you like to play any of the above? If yes, specify the number of the video.\n"
    "If your answer is not a valid number, we will assume it's a no."
)

_NO_VIDEO = "No video is currently playing"
_NO_PLAYLIST = "Playlist does not exist"
_NO_SUCH_VIDEO = "Video does not exist"
_FLAGGED = "Video is currently flagged (reason: {reason})"

# (action, outcome) -> message template; fields come from _fields()
MESSAGES: dict[tuple[str, Outcome], str] = {
    ("number_of_videos", Outcome.OK): "{count} videos in the library",
    ("play", Outcome.OK): "Playing video: {title}",
    ("play", Outcome.VIDEO_NOT_FOUND): f"Cannot play video: {_NO_SUCH_VIDEO}",
    ("play", Outcome.VIDEO_FLAGGED): f"Cannot play video: {_FLAGGED}",
    ("play_random", Outcome.OK): "Playing video: {title}",
    ("play_random", Outcome.NO_CANDIDATES): "No videos available",
    ("stop", Outcome.OK): "Stopping video: {title}",
    ("stop", Outcome.NOTHING_PLAYING): f"Cannot stop video: {_NO_VIDEO}",
    ("pause", Outcome.OK): "Pausing video: {title}",
    ("pause", Outcome.ALREADY_PAUSED): "Video already paused: {title}",
    ("pause", Outcome.NOTHING_PLAYING): f"Cannot pause video: {_NO_VIDEO}",
    ("resume", Outcome.OK): "Continuing video: {title}",
    ("resume", Outcome.NOT_PAUSED): "Cannot continue video: Video is not paused",
    ("resume", Outcome.NOTHING_PLAYING): f"Cannot continue video: {_NO_VIDEO}",
    ("show_playing", Outcome.NOTHING_PLAYING): _NO_VIDEO,
    ("create_playlist", Outcome.OK): "Successfully created new playlist: {playlist}",
    ("create_playlist", Outcome.DUPLICATE_PLAYLIST): (
        "Cannot create playlist: A playlist with the same name already exists"
    ),
    ("add_to_playlist", Outcome.OK): "Added video to {playlist}: {title}",
    ("add_to_playlist", Outcome.PLAYLIST_NOT_FOUND): (
        f"Cannot add video to {{playlist}}: {_NO_PLAYLIST}"
    ),
    ("add_to_playlist", Outcome.VIDEO_NOT_FOUND): (
        f"Cannot add video to {{playlist}}: {_NO_SUCH_VIDEO}"
    ),
    ("add_to_playlist", Outcome.VIDEO_FLAGGED): f"Cannot add video to {{playlist}}: {_FLAGGED}",
    ("add_to_playlist", Outcome.ALREADY_IN_PLAYLIST): (
        "Cannot add video to {playlist}: Video already added"
    ),
    ("remove_from_playlist", Outcome.OK): "Removed video from {playlist}: {title}",
    ("remove_from_playlist", Outcome.PLAYLIST_NOT_FOUND): (
        f"Cannot remove video from {{playlist}}: {_NO_PLAYLIST}"
    ),
    ("remove_from_playlist", Outcome.VIDEO_NOT_FOUND): (
        f"Cannot remove video from {{playlist}}: {_NO_SUCH_VIDEO}"
    ),
    ("remove_from_playlist", Outcome.NOT_IN_PLAYLIST): (
        "Cannot remove video from {playlist}: Video is not in playlist"
    ),
    ("clear_playlist", Outcome.OK): "Successfully removed all videos from {playlist}",
    ("clear_playlist", Outcome.PLAYLIST_NOT_FOUND): (
        f"Cannot clear playlist {{playlist}}: {_NO_PLAYLIST}"
    ),
    ("delete_playlist", Outcome.OK): "Deleted playlist: {playlist}",
    ("delete_playlist", Outcome.PLAYLIST_NOT_FOUND): (
        f"Cannot delete playlist {{playlist}}: {_NO_PLAYLIST}"
    ),
    ("show_playlist", Outcome.PLAYLIST_NOT_FOUND): (
        f"Cannot show playlist {{playlist}}: {_NO_PLAYLIST}"
    ),
    ("flag_video", Outcome.OK): "Successfully flagged video: {title} (reason: {reason})",
    ("flag_video", Outcome.VIDEO_NOT_FOUND): f"Cannot flag video: {_NO_SUCH_VIDEO}",
    ("flag_video", Outcome.ALREADY_FLAGGED): "Cannot flag video: Video is already flagged",
    ("allow_video", Outcome.OK): "Successfully removed flag from video: {title}",
    ("allow_video", Outcome.VIDEO_NOT_FOUND): (
        f"Cannot remove flag from video: {_NO_SUCH_VIDEO}"
    ),
    ("allow_video", Outcome.NOT_FLAGGED): "Cannot remove flag from video: Video is not flagged",
}


def _fields(result: Result) -> dict[str, object]:
    return {
        "title": result.video.title if result.video else "",
        "playlist": result.playlist or "",
        "reason": result.reason if result.reason is not None else "",
        "term": result.term or "",
        "count": result.count if result.count is not None else 0,
    }


def _render_listing(result: Result) -> list[str]:
    if result.action == "show_all_videos":
        return ["Here's a list of all available videos:"] + [str(v) for v in result.videos]

    if result.action == "show_all_playlists":
        if not result.playlists:
            return ["No playlists exist yet"]
        return ["Showing all playlists:"] + [f"  {name}" for name in result.playlists]

    if result.action == "show_playlist":
        lines = [f"Showing playlist: {result.playlist}"]
        if not result.videos:
            return lines + ["  No videos here yet"]
        return lines + [f"  {v}" for v in result.videos]

    if result.action == "show_playing":
        line = f"Currently playing: {result.video}"
        return [line + " - PAUSED" if result.paused else line]

    # search_videos / search_videos_with_tag
    if not result.videos:
        return [f"No search results for {result.term}"]
    lines = [f"Here are the results for {result.term}:"]
    lines += [f"{i}) {v}" for i, v in enumerate(result.videos, start=1)]
    return lines


LISTING_ACTIONS = {
    "show_all_videos",
    "show_all_playlists",
    "show_playlist",
    "show_playing",
    "search_videos",
    "search_videos_with_tag",
}


def render(result: Result) -> list[str]:
    """Render a result as display lines.

    Raises:
        KeyError: If no message exists for the result's action and outcome
    """
    if result.outcome is Outcome.OK and result.action in LISTING_ACTIONS:
        return _render_listing(result)

    lines: list[str] = []
    if result.stopped is not None:
        lines.append(f"Stopping video: {result.stopped.title}")
    template = MESSAGES[(result.action, result.outcome)]
    lines.append(template.format(**_fields(result)))
    return lines
