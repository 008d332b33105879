"""Line-based text and yes/no prompts."""

import logging

from rich.console import Console

logger = logging.getLogger("clipick.prompts")

DEFAULT_PERMISSION_RETRIES = 2
DEFAULT_INPUT_RETRIES = 2


class ConsolePrompter:
    """Asks questions on a rich Console, re-asking when the answer is empty."""

    def __init__(
        self,
        console: Console | None = None,
        permission_retries: int = DEFAULT_PERMISSION_RETRIES,
        input_retries: int = DEFAULT_INPUT_RETRIES,
    ):
        self.console = console or Console()
        self.permission_retries = permission_retries
        self.input_retries = input_retries

    def get_permission(self, prompt: str) -> bool:
        """Ask a yes/no question. Only 'y' or 'Y' counts as yes."""
        for attempt in range(self.permission_retries + 1):
            answer = self._ask(f"\n{prompt} ([green]y[/green]/[red]n[/red]) ")
            if answer:
                return answer in ("y", "Y")
            if attempt < self.permission_retries:
                self.console.print("[yellow]type 'y' or 'n'[/yellow]\n")

        logger.debug("No answer to %r, treating as no", prompt)
        self.console.print("[red]Fine, I'll take that as a no![/red]")
        return False

    def get_input(self, prompt: str) -> str:
        """Ask for a line of text. Returns "" if the user gives up."""
        for attempt in range(self.input_retries + 1):
            answer = self._ask(f"{prompt}\n\n")
            if answer:
                return answer
            if attempt == self.input_retries:
                break
            if not self.get_permission("You didn't type anything. Would you like to try again?"):
                break
        return ""

    def _ask(self, prompt: str) -> str:
        try:
            return self.console.input(prompt)
        except EOFError:
            return ""
