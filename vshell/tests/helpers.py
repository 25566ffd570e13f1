"""Shared fixtures for the VShell tests."""

from typing import Optional

from vshell.core.config_loader import Config
from vshell.filesystem import VirtualFileSystem
from vshell.shell import BufferDisplay, CommandInterpreter, CommandRegistry, SessionState


def make_session(
    seed: Optional[dict] = None,
    registry: Optional[CommandRegistry] = None,
    config: Optional[Config] = None
) -> SessionState:
    """A session over a fresh filesystem, writing to a BufferDisplay."""
    return SessionState(
        fs=VirtualFileSystem(seed=seed),
        display=BufferDisplay(),
        config=config or Config(),
        interpreter=CommandInterpreter(registry=registry),
    )
