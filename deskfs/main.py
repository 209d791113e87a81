#!/usr/bin/env python3
"""
DeskFS - Desktop Filesystem Terminal

Main entry point for DeskFS.

Start-up sequence:
1. Load configuration
2. Initialize logging
3. Build the filesystem and the sample tree
4. Run the terminal

Usage:
    deskfs [--config PATH] [--no-seed] [--debug]

Author: YSNRFD
Version: 1.0.0
"""

import sys
from typing import Optional, List

from deskfs.core.config_loader import ConfigLoader, ConfigValidationError
from deskfs.filesystem import VirtualFileSystem, populate_sample_tree
from deskfs.logger import Logger, LogLevel, get_logger
from deskfs.shell import Shell


USAGE = "usage: deskfs [--config PATH] [--no-seed] [--debug]"


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for DeskFS.

    Returns:
        Exit code
    """
    args = list(sys.argv[1:] if argv is None else argv)

    config_path = None
    seed = None
    debug = False

    while args:
        arg = args.pop(0)
        if arg == '--config' and args:
            config_path = args.pop(0)
        elif arg == '--no-seed':
            seed = False
        elif arg == '--debug':
            debug = True
        elif arg in ('-h', '--help'):
            print(USAGE)
            return 0
        else:
            print(USAGE, file=sys.stderr)
            return 2

    loader = ConfigLoader()
    if config_path:
        try:
            loader.load(config_path)
        except ConfigValidationError as e:
            print(f"deskfs: {e.message}", file=sys.stderr)
            return 1
    config = loader.config

    level = LogLevel.DEBUG if debug else LogLevel.from_name(config.logging.level)
    Logger.initialize(
        level=level,
        log_file=config.logging.log_file,
        use_colors=config.logging.use_colors,
        console_output=config.logging.console_output,
    )
    logger = get_logger('main')

    vfs = VirtualFileSystem()
    if config.filesystem.seed_sample_tree if seed is None else seed:
        populate_sample_tree(vfs)

    logger.info(
        f"{config.app.name} {config.app.version} ready",
        context=vfs.get_stats()
    )

    shell = Shell(vfs, config=config.shell, directories_first=config.filesystem.directories_first)
    print(f"\n{config.app.welcome_message}")
    print("Type 'help' for a list of commands.\n")

    try:
        shell.run()
    except KeyboardInterrupt:
        print("\n\nInterrupted")

    return 0


if __name__ == '__main__':
    sys.exit(main())
