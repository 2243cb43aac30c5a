"""Interactive terminal prompts using rich."""

from typing import Optional

from rich.console import Console
from rich.prompt import Prompt

from mdcompose.formatting.ir import AuxiliaryField
from mdcompose.inputs.base import AuxiliaryInput


class ConsoleInput(AuxiliaryInput):
    """Ask the user for each value on the terminal.

    A blank answer cancels the prompt unless a default is offered, in which
    case the default is used. End of input also cancels.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(stderr=True)

    def ask(self, field: AuxiliaryField, default: Optional[str] = None) -> Optional[str]:
        try:
            if default is None:
                answer = Prompt.ask(field.prompt, console=self.console)
            else:
                answer = Prompt.ask(field.prompt, console=self.console, default=default)
        except EOFError:
            return None
        return answer or None
