"""
DeskFS Shell Module

The interactive terminal for the desktop filesystem.

Author: YSNRFD
Version: 1.0.0
"""

import sys
from dataclasses import dataclass, field
from typing import Optional, List, TextIO

from .parser import CommandParser
from .builtins import BuiltinCommands
from deskfs.core.config_loader import ShellConfig, get_config
from deskfs.exceptions import TreeException, CommandNotFoundError
from deskfs.filesystem import VirtualFileSystem, Session, READ, APPEND
from deskfs.logger import get_logger


CAPTURE_END = '.'


@dataclass
class PendingWrite:
    """Lines collected for a cat write that has no inline text."""
    mode: str
    path: str
    lines: List[str] = field(default_factory=list)


class Shell:
    """
    DeskFS Terminal.

    Provides:
    - Command parsing
    - Built-in commands and filesystem operations
    - Multi-line capture for cat writes
    - Command history
    - Its own working directory (session)

    Example:
        >>> with Shell(VirtualFileSystem()) as shell:
        ...     shell.execute('mkdir docs')
        0

    The session opened for the shell is released by run(), run_script()
    or leaving the with block.
    """

    def __init__(
        self,
        vfs: VirtualFileSystem,
        config: Optional[ShellConfig] = None,
        output: Optional[TextIO] = None,
        directories_first: Optional[bool] = None,
        start: Optional[str] = None
    ):
        self._vfs = vfs
        self._config = config or get_config().shell
        self._directories_first = (
            get_config().filesystem.directories_first
            if directories_first is None else directories_first
        )
        self._output = output
        self._logger = get_logger('shell')
        self._parser = CommandParser(history_size=self._config.history_size)
        self._builtins = BuiltinCommands(self)
        self._session = vfs.open_session(start, name='terminal')
        self._pending: Optional[PendingWrite] = None
        self._running = False
        self._exiting = False

    @property
    def vfs(self) -> VirtualFileSystem:
        return self._vfs

    @property
    def session(self) -> Session:
        return self._session

    @property
    def config(self) -> ShellConfig:
        return self._config

    @property
    def parser(self) -> CommandParser:
        return self._parser

    @property
    def directories_first(self) -> bool:
        return self._directories_first

    @property
    def cwd(self) -> str:
        return self._vfs.display_path(self._session.pointer)

    @property
    def capturing(self) -> bool:
        return self._pending is not None

    @property
    def exiting(self) -> bool:
        return self._exiting

    def echo(self, text: str = '', end: str = '\n') -> None:
        """Write a line to the terminal."""
        stream = self._output or sys.stdout
        stream.write(text + end)

    def prompt(self) -> str:
        """Generate the prompt."""
        if self.capturing:
            return '> '
        return f"{self.cwd} {self._config.prompt}"

    def run(self) -> None:
        """
        Run the interactive shell.

        This is the main REPL loop. EOF commits a pending write, or
        exits when nothing is pending.
        """
        self._running = True

        while self._running and not self._exiting:
            try:
                line = input(self.prompt())
            except EOFError:
                if self.capturing:
                    self.echo()
                    self._finish_capture()
                    continue
                self.echo()
                break
            except KeyboardInterrupt:
                self.echo("^C")
                self.cancel_capture()
                continue

            self.execute(line)

        self._running = False
        self.close()

    def execute(self, line: str) -> int:
        """
        Execute one line of input.

        Args:
            line: Command line, or a content line while capturing

        Returns:
            Exit code
        """
        if self.capturing:
            return self._feed_capture(line)

        cmd = self._parser.parse(line)

        if cmd is None:
            return 0

        self._logger.debug(
            "Executing command",
            context={'command': cmd.command, 'sid': self._session.sid}
        )

        try:
            return self._builtins.execute(cmd.command, cmd.args)
        except CommandNotFoundError as e:
            self.echo(e.message)
            return 127
        except TreeException as e:
            self._logger.warning(
                f"{cmd.command} failed: {e.message}",
                context={'error_code': e.error_code}
            )
            self.echo(f"{cmd.command}: {e.message}")
            return 1

    def run_script(self, script: str) -> int:
        """
        Run several lines of input.

        Like run(), this releases the shell's session when done.

        Returns:
            Last exit code
        """
        exit_code = 0

        try:
            for line in script.split('\n'):
                exit_code = self.execute(line)
                if self._exiting:
                    break

            if self.capturing:
                exit_code = self._finish_capture()
        finally:
            self.close()

        return exit_code

    # Capture mode

    def begin_capture(self, mode: str, path: str) -> None:
        """Start collecting lines for a cat write."""
        self._pending = PendingWrite(mode=mode, path=path)

    def cancel_capture(self) -> None:
        """Drop collected lines without writing."""
        self._pending = None

    def _feed_capture(self, line: str) -> int:
        if line.strip() == CAPTURE_END:
            return self._finish_capture()
        self._pending.lines.append(line)
        return 0

    def _finish_capture(self) -> int:
        pending = self._pending
        self._pending = None

        text = '\n'.join(pending.lines)

        try:
            # Collected lines start a new line after existing text
            if pending.mode == APPEND and pending.lines:
                if self._vfs.cat(READ, pending.path, session=self._session):
                    text = '\n' + text
            self._vfs.cat(pending.mode, pending.path, text, session=self._session)
        except TreeException as e:
            self.echo(f"cat: {e.message}")
            return 1
        return 0

    def request_exit(self) -> None:
        """Request the shell to exit."""
        self._exiting = True

    def close(self) -> None:
        """Release the shell's session."""
        self._vfs.close_session(self._session)

    def __enter__(self) -> 'Shell':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def create_shell(vfs: Optional[VirtualFileSystem] = None, **kwargs) -> Shell:
    """Factory function to create a shell."""
    return Shell(vfs if vfs is not None else VirtualFileSystem(), **kwargs)
