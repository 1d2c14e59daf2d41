"""ProjectTelemetry: console status lines plus a stdlib logger. Implements TelemetryPort."""

import logging

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from solid_architect.domain.constants import SOLID_BANNER


class ProjectTelemetry:
    """Status output on stderr so stdout carries only the report."""

    def __init__(self, project_name: str, color: str, welcome: str) -> None:
        self.project_name = project_name
        self.color = color
        self.welcome = welcome
        self.console = Console(stderr=True)
        self.logger = logging.getLogger(f"solid_architect.{project_name.lower()}")

    def handshake(self) -> None:
        """Print the banner and the welcome line."""
        self.console.print(Text.from_ansi(SOLID_BANNER), highlight=False)
        self.console.print(f"[{self.color}]{escape('[' + self.project_name + ']')}[/] {escape(self.welcome)}")
        self.logger.info("%s session started", self.project_name)

    def step(self, message: str) -> None:
        self.console.print(f"[{self.color}]>[/] {escape(message)}", highlight=False)
        self.logger.info(message)

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]ERROR[/] {escape(message)}", highlight=False)
        self.logger.error(message)

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]WARNING[/] {escape(message)}", highlight=False)
        self.logger.warning(message)

    def debug(self, message: str) -> None:
        self.logger.debug(message)
