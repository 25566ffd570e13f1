#!/usr/bin/env python3
"""
VShell - console driver

Runs a shell session in a terminal. Each typed line is turned into
keystrokes so that the same state machine as in the browser is exercised:

- a line ending in a tab character asks for completion instead of
  submitting (the completed line is offered again as the next prompt)
- while ``vi`` is open, lines are typed into the editor; a line starting
  with ':' is sent as Escape followed by that editor command
"""

import argparse
import sys
from typing import List, Optional

from vshell.core.config_loader import ConfigLoader, get_config
from vshell.exceptions import ConfigValidationError
from vshell.logger import Logger, LogLevel, get_logger
from vshell.shell import ConsoleDisplay, KeyCode, KeyEvent, SessionState


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='vshell',
        description="Simulated shell over an in-memory filesystem.",
    )
    parser.add_argument('--config', help="path to a JSON configuration file")
    parser.add_argument(
        '--log-level',
        choices=[level.name for level in LogLevel],
        help="override the configured log level",
    )
    return parser


def feed_line(session: SessionState, line: str) -> None:
    """Send one typed line to the session as keystrokes."""
    if session.child_process is not None and line.startswith(':'):
        session.parse_keystroke(KeyEvent.key(KeyCode.ESCAPE))

    submit = not line.endswith('\t')
    session.type_text(line)
    if submit:
        session.parse_keystroke(KeyEvent.key(KeyCode.ENTER))


def run(session: SessionState, stdin=None) -> None:
    """Read lines until end of input."""
    stdin = stdin or sys.stdin
    interactive = stdin.isatty()

    while True:
        prompt = '' if session.child_process is not None else session.prompt + session.buffer
        try:
            if interactive:
                line = input(prompt)
            else:
                line = stdin.readline()
                if not line:
                    break
                line = line.rstrip('\n')
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print("^C")
            session.buffer = ''
            continue

        if interactive and session.child_process is None and not line.endswith('\t'):
            # The display echoes the submitted line itself.
            sys.stdout.write('\033[F\033[K')
        editing = session.child_process is not None
        feed_line(session, line)
        if interactive and editing and session.child_process is None:
            # The editor re-rendered the prompt; input() shows it again.
            sys.stdout.write('\033[F\033[K')


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    if args.config:
        try:
            config = ConfigLoader().load(args.config)
        except ConfigValidationError as e:
            print(f"vshell: {e.message}", file=sys.stderr)
            return 1
    else:
        config = get_config()

    level_name = args.log_level or config.logging.level
    Logger.initialize(
        level=LogLevel.from_name(level_name),
        log_file=config.logging.log_file,
        console=config.logging.console_output,
    )
    get_logger('session').info("Starting session", context={'user': config.shell.user})

    session = SessionState(config=config, display=ConsoleDisplay())
    try:
        run(session)
    except KeyboardInterrupt:
        print("\n\nInterrupted")
    return 0


if __name__ == '__main__':
    sys.exit(main())
