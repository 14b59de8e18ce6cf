"""Interactive command dispatch for the vidplay shell."""

from collections.abc import Callable
from dataclasses import dataclass

from vidplay.display import SEARCH_PROMPT, render
from vidplay.library import LibraryManager
from vidplay.logging import logger
from vidplay.results import Result

INVALID_COMMAND = "Please enter a valid command, type HELP for a list of available commands."


@dataclass(frozen=True)
class Command:
    """Shell command bound to a library operation."""

    name: str
    usage: str
    help: str
    min_args: int = 0
    max_args: int = 0


COMMANDS: dict[str, Command] = {
    c.name: c
    for c in [
        Command("NUMBER_OF_VIDEOS", "", "Shows how many videos are in the library."),
        Command("SHOW_ALL_VIDEOS", "", "Lists all videos in the library."),
        Command("PLAY", "<video_id>", "Plays the given video.", 1, 1),
        Command("PLAY_RANDOM", "", "Plays a random unflagged video."),
        Command("STOP", "", "Stops the current video."),
        Command("PAUSE", "", "Pauses the current video."),
        Command("CONTINUE", "", "Resumes the paused video."),
        Command("SHOW_PLAYING", "", "Shows the current video and whether it is paused."),
        Command("CREATE_PLAYLIST", "<playlist_name>", "Creates an empty playlist.", 1, 1),
        Command(
            "ADD_TO_PLAYLIST", "<playlist_name> <video_id>", "Adds a video to a playlist.", 2, 2
        ),
        Command(
            "REMOVE_FROM_PLAYLIST",
            "<playlist_name> <video_id>",
            "Removes a video from a playlist.",
            2,
            2,
        ),
        Command("CLEAR_PLAYLIST", "<playlist_name>", "Removes every video from a playlist.", 1, 1),
        Command("DELETE_PLAYLIST", "<playlist_name>", "Deletes a playlist.", 1, 1),
        Command("SHOW_PLAYLIST", "<playlist_name>", "Lists the videos in a playlist.", 1, 1),
        Command("SHOW_ALL_PLAYLISTS", "", "Lists all playlists."),
        Command(
            "SEARCH_VIDEOS", "<search_term>", "Finds videos whose title contains the term.", 1, 1
        ),
        Command("SEARCH_VIDEOS_WITH_TAG", "<tag>", "Finds videos carrying the tag.", 1, 1),
        Command(
            "FLAG_VIDEO",
            "<video_id> [reason]",
            "Flags a video so it cannot be played or added to playlists.",
            1,
            -1,
        ),
        Command("ALLOW_VIDEO", "<video_id>", "Removes the flag from a video.", 1, 1),
        Command("HELP", "", "Shows this help."),
        Command("EXIT", "", "Leaves the shell."),
    ]
}


def help_text() -> str:
    lines = ["Available commands:"]
    for cmd in COMMANDS.values():
        head = f"{cmd.name} {cmd.usage}".rstrip()
        lines.append(f"    {head} - {cmd.help}")
    return "\n".join(lines)


class CommandDispatcher:
    """Parses shell lines and routes them to a ``LibraryManager``.

    Output goes through ``emit`` one line at a time. ``read_line`` is only
    used for the "play one of these results?" follow-up after a search; it
    may raise EOFError or KeyboardInterrupt, both of which count as declining.
    """

    def __init__(
        self,
        manager: LibraryManager,
        read_line: Callable[[], str],
        emit: Callable[[str], None],
    ) -> None:
        self.manager = manager
        self._read_line = read_line
        self._emit = emit

    def execute(self, line: str) -> bool:
        """Run one command line. Returns False when the shell should exit."""
        words = line.split()
        if not words:
            return True
        name, args = words[0].upper(), words[1:]
        cmd = COMMANDS.get(name)
        if cmd is None or not self._arity_ok(cmd, args):
            logger.debug("Rejected command line: {!r}", line)
            self._emit(INVALID_COMMAND)
            return True
        if name == "EXIT":
            return False
        if name == "HELP":
            self._emit(help_text())
            return True

        result = self._dispatch(name, args)
        self._show(result)
        if name in ("SEARCH_VIDEOS", "SEARCH_VIDEOS_WITH_TAG") and result.videos:
            self._offer_play(result)
        return True

    @staticmethod
    def _arity_ok(cmd: Command, args: list[str]) -> bool:
        if len(args) < cmd.min_args:
            return False
        return cmd.max_args < 0 or len(args) <= cmd.max_args

    def _dispatch(self, name: str, args: list[str]) -> Result:
        m = self.manager
        if name == "FLAG_VIDEO":
            if len(args) > 1:
                return m.flag_video(args[0], " ".join(args[1:]))
            return m.flag_video(args[0])
        handlers: dict[str, Callable[..., Result]] = {
            "NUMBER_OF_VIDEOS": m.number_of_videos,
            "SHOW_ALL_VIDEOS": m.show_all_videos,
            "PLAY": m.play,
            "PLAY_RANDOM": m.play_random,
            "STOP": m.stop,
            "PAUSE": m.pause,
            "CONTINUE": m.resume,
            "SHOW_PLAYING": m.show_playing,
            "CREATE_PLAYLIST": m.create_playlist,
            "ADD_TO_PLAYLIST": m.add_to_playlist,
            "REMOVE_FROM_PLAYLIST": m.remove_from_playlist,
            "CLEAR_PLAYLIST": m.clear_playlist,
            "DELETE_PLAYLIST": m.delete_playlist,
            "SHOW_PLAYLIST": m.show_playlist,
            "SHOW_ALL_PLAYLISTS": m.show_all_playlists,
            "SEARCH_VIDEOS": m.search_videos,
            "SEARCH_VIDEOS_WITH_TAG": m.search_videos_with_tag,
            "ALLOW_VIDEO": m.allow_video,
        }
        return handlers[name](*args)

    def _show(self, result: Result) -> None:
        for text in render(result):
            self._emit(text)

    def _offer_play(self, result: Result) -> None:
        """Ask which search result to play; anything but a valid number is a no."""
        self._emit(SEARCH_PROMPT)
        try:
            answer = self._read_line()
        except (EOFError, KeyboardInterrupt):
            return
        index = parse_choice(answer, len(result.videos))
        if index is None:
            return
        self._show(self.manager.play(result.videos[index - 1].id))


def parse_choice(answer: str, count: int) -> int | None:
    """1-based index from user input, None unless it is an integer in range."""
    text = answer.strip()
    # plain ASCII digits only; int() would also take "+1", "1_0" and other scripts
    if not (text.isascii() and text.isdigit()):
        return None
    index = int(text)
    if index < 1 or index > count:
        return None
    return index
