"""
Shell Built-in Commands

Implements the terminal's commands on top of the virtual file system.

Author: YSNRFD
Version: 1.0.0
"""

import re
from typing import Callable, List

from deskfs.exceptions import CommandNotFoundError, MissingArgumentError
from deskfs.filesystem import READ, OVERWRITE, APPEND


# Filesystem operations callable as-is, with the number of positional
# arguments each takes.
PASSTHROUGH_COMMANDS: dict[str, int] = {
    'mkdir': 1,
    'rmdir': 1,
    'rm': 1,
    'rn': 2,
    'cp': 2,
    'mv': 2,
}

_LINE_BREAK = re.compile(r'\r?\n')


class BuiltinCommands:
    """
    Built-in terminal commands.

    Commands write through the shell's output and return an exit
    code. Filesystem failures propagate to the shell, which reports
    them.
    """

    def __init__(self, shell):
        """
        Initialize built-in commands.

        Args:
            shell: The shell instance
        """
        self._shell = shell
        self._commands: dict[str, Callable[[List[str]], int]] = {
            'help': self.cmd_help,
            'exit': self.cmd_exit,
            'ls': self.cmd_ls,
            'cd': self.cmd_cd,
            'pwd': self.cmd_pwd,
            'cat': self.cmd_cat,
            'show': self.cmd_show,
            'edit': self.cmd_edit,
            'whereis': self.cmd_whereis,
            'tree': self.cmd_tree,
            'clear': self.cmd_clear,
            'history': self.cmd_history,
        }

    def execute(self, name: str, args: List[str]) -> int:
        """
        Execute a command.

        Args:
            name: Command name
            args: Command arguments

        Returns:
            Exit code

        Raises:
            CommandNotFoundError: If the command does not exist
        """
        cmd = self._commands.get(name)
        if cmd is not None:
            return cmd(args)

        if name in PASSTHROUGH_COMMANDS:
            return self._passthrough(name, args)

        raise CommandNotFoundError(name)

    def _passthrough(self, name: str, args: List[str]) -> int:
        arity = PASSTHROUGH_COMMANDS[name]
        params = (args + [None] * arity)[:arity]
        operation = getattr(self._shell.vfs, name)
        operation(*params, session=self._shell.session)
        return 0

    # Command implementations

    def cmd_help(self, args: List[str]) -> int:
        """Display help information."""
        self._shell.echo("""
DeskFS Terminal - Commands

Navigation:
  ls [path]             List directory contents
  cd [path]             Change directory (root if omitted)
  pwd                   Print working directory
  tree [path]           Show a directory tree
  whereis <pattern>     Find entries by name ('*' matches anything)

Files:
  cat <file>            Display file contents
  cat > <file> [text]   Overwrite a file (reads lines until '.' if no text)
  cat >> <file> [text]  Append to a file (reads lines until '.' if no text)
  show <file>           Same as cat <file>
  edit <file>           Same as cat >> <file>
  rm <file>             Remove file
  mkdir <path>          Create directory
  rmdir <path>          Remove directory and its contents
  rn <path> <name>      Rename an entry
  cp <path> <dir>       Copy an entry into a directory
  mv <path> <dir>       Move an entry into a directory

Shell:
  clear                 Clear screen
  history [-c]          Display (or clear) command history
  help                  Display this help
  exit                  Exit the terminal
""")
        return 0

    def cmd_exit(self, args: List[str]) -> int:
        """Exit the shell."""
        self._shell.request_exit()
        return 0

    def cmd_ls(self, args: List[str]) -> int:
        """List directory contents in columns."""
        vfs = self._shell.vfs
        entries = vfs.ls(args[0] if args else None, session=self._shell.session)

        if self._shell.directories_first:
            entries = vfs.sort_entries(entries)

        names = [e.key + '/' if vfs.is_directory(e) else e.key for e in entries]
        for line in self._columns(names):
            self._shell.echo(line)
        return 0

    def _columns(self, names: List[str]) -> List[str]:
        if not names:
            return []

        config = self._shell.config
        width = max(len(name) for name in names) + config.column_padding
        columns = max(1, config.terminal_width // width)

        lines = []
        for start in range(0, len(names), columns):
            row = names[start:start + columns]
            lines.append(''.join(name.ljust(width) for name in row).rstrip())
        return lines

    def cmd_cd(self, args: List[str]) -> int:
        """Change directory."""
        path = args[0] if args else '/'
        self._shell.vfs.cd(path, session=self._shell.session)
        return 0

    def cmd_pwd(self, args: List[str]) -> int:
        """Print working directory."""
        self._shell.echo(self._shell.cwd)
        return 0

    def cmd_cat(self, args: List[str]) -> int:
        """
        Read or write a file.

        cat <file> prints it. cat > <file> <text> and cat >> <file> <text>
        overwrite or append. Without text, the shell collects the
        following lines and writes them when a lone '.' is entered.
        """
        vfs = self._shell.vfs
        session = self._shell.session

        if not args or args[0] not in (OVERWRITE, APPEND):
            path = args[0] if args else None
            self._print_contents(vfs.cat(READ, path, session=session))
            return 0

        mode = args[0]
        if len(args) < 2:
            raise MissingArgumentError('path')
        path = args[1]

        if len(args) > 2:
            vfs.cat(mode, path, ' '.join(args[2:]), session=session)
            return 0

        # Creates the file (or truncates it for '>') before collecting
        vfs.cat(mode, path, '', session=session)
        if mode == APPEND:
            self._print_contents(vfs.cat(READ, path, session=session))
        self._shell.begin_capture(mode, path)
        return 0

    def _print_contents(self, contents: str) -> None:
        for line in _LINE_BREAK.split(contents):
            self._shell.echo(line)

    def cmd_show(self, args: List[str]) -> int:
        """Display a file."""
        return self.cmd_cat(args[:1])

    def cmd_edit(self, args: List[str]) -> int:
        """Append lines to a file."""
        return self.cmd_cat([APPEND] + args[:1])

    def cmd_whereis(self, args: List[str]) -> int:
        """Find entries whose names match a pattern."""
        vfs = self._shell.vfs
        query = args[0] if args else None
        results = vfs.whereis(query)

        if not results:
            self._shell.echo(f"No results found: {query}")
            return 1

        for node in results:
            self._shell.echo(vfs.display_path(node))
        return 0

    def cmd_tree(self, args: List[str]) -> int:
        """Show a directory and everything below it."""
        vfs = self._shell.vfs
        session = self._shell.session
        top = vfs.resolve(args[0], session=session) if args else session.pointer
        entries = vfs.sort_entries(vfs.ls(top))

        self._shell.echo(vfs.display_path(top))

        stack = [(child, 1) for child in reversed(entries)]
        while stack:
            node, depth = stack.pop()
            if vfs.is_directory(node):
                self._shell.echo('  ' * depth + node.key + '/')
                children = vfs.sort_entries(vfs.ls(node))
                stack.extend((child, depth + 1) for child in reversed(children))
            else:
                self._shell.echo('  ' * depth + node.key)
        return 0

    def cmd_clear(self, args: List[str]) -> int:
        """Clear screen."""
        self._shell.echo("\033[2J\033[H", end='')
        return 0

    def cmd_history(self, args: List[str]) -> int:
        """Display command history, or clear it with -c."""
        if args and args[0] == '-c':
            self._shell.parser.clear_history()
            return 0

        for i, cmd in enumerate(self._shell.parser.get_history(), 1):
            self._shell.echo(f"{i:>5}  {cmd}")
        return 0
