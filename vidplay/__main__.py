"""vidplay CLI - video library and playback control panel."""

import json
import random
import tomllib
from pathlib import Path
from typing import Any

import fire
from pydantic import ValidationError
from rich.console import Console

from vidplay import __version__
from vidplay.commands import CommandDispatcher
from vidplay.config import get_config_path, load_config
from vidplay.display import render
from vidplay.library import DEFAULT_FLAG_REASON, LibraryManager
from vidplay.loader import load_catalogue
from vidplay.logging import configure_logging, logger
from vidplay.models import CatalogueError
from vidplay.results import Result

console = Console()
err_console = Console(stderr=True)

PROMPT = "VideoPlayer> "
GREETING = (
    "Hello and welcome to vidplay, what would you like to do?\n"
    "Enter HELP for list of available commands or EXIT to terminate."
)
FAREWELL = "vidplay has now terminated its execution. Thank you and goodbye!"


class VidplayCLI:
    """Video library control panel: play, pause, playlists, search and flags.

    State lives only for one invocation; use ``shell`` for a session.

    Examples:
        vidplay shell
        vidplay show_all_videos
        vidplay --catalogue videos.yaml search_videos cat
        vidplay --json-output --seed 7 play_random
    """

    def __init__(
        self,
        verbose: bool = False,
        json_output: bool = False,
        catalogue: str | None = None,
        seed: int | None = None,
    ) -> None:
        """Initialize CLI with options.

        Args:
            verbose: Enable debug logging
            json_output: Output results as JSON instead of human-readable text
            catalogue: Catalogue file (.txt or .yaml); defaults to config, then the bundled list
            seed: Random seed for play_random
        """
        try:
            config = load_config()
        except (ValidationError, tomllib.TOMLDecodeError) as e:
            err_console.print(f"[red]Invalid config file {get_config_path()}:[/red] {e}")
            raise SystemExit(1) from e
        configure_logging(verbose or config.verbose)
        self._json = json_output
        self._catalogue_path = catalogue or config.catalogue
        self._seed = seed if seed is not None else config.seed
        self._manager: LibraryManager | None = None
        logger.debug(
            "vidplay initialized with verbose={}, json={}, catalogue={}, seed={}",
            verbose,
            json_output,
            self._catalogue_path,
            self._seed,
        )

    @property
    def manager(self) -> LibraryManager:
        """Library manager, built on first use."""
        if self._manager is None:
            try:
                catalogue = load_catalogue(self._catalogue_path)
            except CatalogueError as e:
                err_console.print(f"[red]Cannot load catalogue:[/red] {e}")
                raise SystemExit(1) from e
            self._manager = LibraryManager(catalogue, random.Random(self._seed))
        return self._manager

    def _output(self, data: dict[str, Any]) -> None:
        print(json.dumps(data, indent=2))

    def _show(self, result: Result) -> None:
        """Print a result as JSON or as rendered text."""
        if self._json:
            self._output(result.to_dict())
            return
        for line in render(result):
            self._emit(line)

    def version(self) -> None:
        """Show vidplay version."""
        if self._json:
            self._output({"version": __version__})
        else:
            console.print(f"vidplay {__version__}")

    def config(self) -> None:
        """Show configuration path and effective settings.

        Example:
            vidplay config
        """
        config_path = get_config_path()
        settings = {
            "config_path": str(config_path),
            "config_exists": config_path.exists(),
            "catalogue": self._catalogue_path or "<bundled>",
            "seed": self._seed,
        }
        if self._json:
            self._output(settings)
            return
        console.print(f"[bold]Config path:[/bold] {config_path}")
        if not config_path.exists():
            console.print("[yellow]No config file, using defaults[/yellow]")
        console.print(f"[bold]Catalogue:[/bold] {settings['catalogue']}", highlight=False)
        console.print(f"[bold]Seed:[/bold] {self._seed}")

    def number_of_videos(self) -> None:
        """Show how many videos are in the catalogue."""
        self._show(self.manager.number_of_videos())

    def show_all_videos(self) -> None:
        """List all videos sorted by title."""
        self._show(self.manager.show_all_videos())

    def play(self, video_id: str) -> None:
        """Play a video by id.

        Args:
            video_id: Catalogue video id
        """
        self._show(self.manager.play(str(video_id)))

    def play_random(self) -> None:
        """Play a random unflagged video."""
        self._show(self.manager.play_random())

    def search_videos(self, term: str) -> None:
        """Search unflagged videos by title substring (case-insensitive).

        Args:
            term: Text to look for in titles
        """
        self._show(self.manager.search_videos(str(term)))

    def search_videos_with_tag(self, tag: str) -> None:
        """Search unflagged videos by exact tag (case-insensitive).

        Args:
            tag: Tag such as "#cat"
        """
        self._show(self.manager.search_videos_with_tag(str(tag)))

    def flag_video(self, video_id: str, reason: str = DEFAULT_FLAG_REASON) -> None:
        """Flag a video so it can no longer be played or added to playlists.

        Args:
            video_id: Catalogue video id
            reason: Why the video is flagged
        """
        self._show(self.manager.flag_video(str(video_id), str(reason)))

    def _emit(self, text: str) -> None:
        console.print(text, markup=False, highlight=False, soft_wrap=True)

    def run(self, file_path: str) -> None:
        """Run shell commands from a file, one per line, in a single session.

        Lines starting with '#' are skipped. A search result prompt reads the
        next line of the file as the answer.

        Args:
            file_path: Text file with one command per line

        Example:
            vidplay run session.txt
        """
        path = Path(file_path)
        if not path.exists():
            err_console.print(f"[red]File not found:[/red] {path}")
            raise SystemExit(1)
        lines = iter(path.read_text(encoding="utf-8").splitlines())

        def next_line() -> str:
            try:
                return next(lines)
            except StopIteration:
                raise EOFError from None

        dispatcher = CommandDispatcher(self.manager, read_line=next_line, emit=self._emit)
        for line in lines:
            if line.lstrip().startswith("#"):
                continue
            logger.debug("> {}", line)
            if not dispatcher.execute(line):
                break

    def shell(self) -> None:
        """Run an interactive session (PLAY, PAUSE, CREATE_PLAYLIST, ... HELP, EXIT)."""
        dispatcher = CommandDispatcher(self.manager, read_line=console.input, emit=self._emit)
        console.print(GREETING, markup=False, highlight=False)
        while True:
            try:
                line = console.input(PROMPT)
            except (EOFError, KeyboardInterrupt):
                break
            if not dispatcher.execute(line):
                break
        console.print(FAREWELL, markup=False, highlight=False)


def main() -> None:
    """CLI entry point."""
    fire.Fire(VidplayCLI)


if __name__ == "__main__":
    main()
