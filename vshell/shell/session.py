"""
VShell Session Module

One shell session: the line buffer, command history, tab state and current
directory, plus the keystroke state machine that drives them.
"""

from typing import Callable, List, Optional

from vshell.core.config_loader import Config, get_config
from vshell.filesystem import Directory, TextFile, VirtualFileSystem
from vshell.logger import get_logger
from .autocomplete import AutocompleteEngine
from .builtins import CommandRegistry
from .display import ConsoleDisplay, Display
from .editor import ChildProcess, TextEditor
from .interpreter import CommandInterpreter
from .keys import KeyCode, KeyEvent, events_for
from .result import CommandResult


EditorFactory = Callable[['SessionState', List[str], Optional[TextFile]], ChildProcess]


class SessionState:
    """
    A single interactive shell session.

    Keystrokes arrive through parse_keystroke(). While a child process
    (the editor) is running, it receives them instead.

    Example:
        >>> session = SessionState(display=BufferDisplay())
        >>> session.type_text("echo hi\\n")
        >>> session.display.lines[-1]
        'hi'
    """

    def __init__(
        self,
        fs: Optional[VirtualFileSystem] = None,
        display: Optional[Display] = None,
        config: Optional[Config] = None,
        interpreter: Optional[CommandInterpreter] = None,
        editor_factory: Optional[EditorFactory] = None
    ):
        self._logger = get_logger('session')
        self._config = config if config is not None else get_config()

        if fs is None:
            fs = VirtualFileSystem(
                root_label=self._config.filesystem.root_label,
                seed=self._config.filesystem.seed,
            )
        self._fs = fs
        self._display = display if display is not None else ConsoleDisplay()
        self._interpreter = interpreter if interpreter is not None else CommandInterpreter()
        self._autocomplete = AutocompleteEngine(self._interpreter.registry)
        self._editor_factory = editor_factory or TextEditor

        self._current_dir: Directory = fs.root
        self._child_process: Optional[ChildProcess] = None

        self.buffer = ''
        self.history: List[str] = []
        self.history_index = 0
        self.tab_pending = False

    @property
    def fs(self) -> VirtualFileSystem:
        return self._fs

    @property
    def display(self) -> Display:
        return self._display

    @property
    def config(self) -> Config:
        return self._config

    @property
    def interpreter(self) -> CommandInterpreter:
        return self._interpreter

    @property
    def registry(self) -> CommandRegistry:
        return self._interpreter.registry

    @property
    def autocomplete(self) -> AutocompleteEngine:
        return self._autocomplete

    @property
    def current_dir(self) -> Directory:
        return self._current_dir

    @property
    def user(self) -> str:
        return self._config.shell.user

    @property
    def child_process(self) -> Optional[ChildProcess]:
        return self._child_process

    @property
    def prompt(self) -> str:
        """Prompt string for the current user and directory."""
        shell = self._config.shell
        return shell.prompt_template.format(
            user=shell.user,
            hostname=shell.hostname,
            path=self._current_dir.path,
        )

    def change_directory(self, directory: Directory) -> None:
        self._current_dir = directory
        self._logger.debug("Changed directory", context={'path': directory.path})

    # Child process

    def open_editor(self, segments: List[str], text_file: Optional[TextFile]) -> ChildProcess:
        """Start the editor; keystrokes go to it until it exits."""
        self._child_process = self._editor_factory(self, segments, text_file)
        self._logger.debug("Child process started", context={'path': '/'.join(segments)})
        return self._child_process

    def kill_child_process(self) -> None:
        """Hand keystrokes back to the shell and show the prompt again."""
        self._child_process = None
        self._display.print(self.prompt)
        self._logger.debug("Child process exited")

    # Keystrokes

    def parse_keystroke(self, event: KeyEvent) -> None:
        """Route a keystroke to the child process if one is running."""
        if self._child_process is not None:
            self._child_process.parse_keystroke(event)
        else:
            self.shell_keystroke(event)

    def type_text(self, text: str) -> None:
        """Feed text as keystrokes (see keys.events_for)."""
        for event in events_for(text):
            self.parse_keystroke(event)

    def shell_keystroke(self, event: KeyEvent) -> None:
        """Process one keystroke in line-editing mode."""
        if event.code == KeyCode.TAB:
            self.handle_tab()
            return

        self.tab_pending = False

        if event.code == KeyCode.ENTER:
            self.handle_enter()
        elif event.code == KeyCode.BACKSPACE:
            self.buffer = self.buffer[:-1]
        elif event.code == KeyCode.UP:
            if self.history_index > 0:
                self.history_index -= 1
                self.buffer = self.history[self.history_index]
        elif event.code == KeyCode.DOWN:
            if self.history_index < len(self.history):
                self.history_index += 1
                if self.history_index == len(self.history):
                    self.buffer = ''
                else:
                    self.buffer = self.history[self.history_index]
        elif event.character:
            self.buffer += event.character

    def handle_enter(self) -> None:
        """Submit the line buffer."""
        line = self.buffer
        if not line.strip(' '):
            self._display.print(self.prompt)
        else:
            self._display.print(self.prompt + line)
            self.history.append(line)
            result = self.execute(line)
            for output_line in result.render():
                self._display.print(output_line)
        self.buffer = ''
        self.history_index = len(self.history)

    def handle_tab(self) -> None:
        if not self._config.shell.enable_autocomplete:
            return
        self._autocomplete.complete(self)

    def execute(self, line: str) -> CommandResult:
        """Run a line through the interpreter without touching history."""
        return self._interpreter.execute(self, line)


def create_session(
    config: Optional[Config] = None,
    display: Optional[Display] = None
) -> SessionState:
    """Factory function to create a session with a freshly seeded filesystem."""
    return SessionState(config=config, display=display)
