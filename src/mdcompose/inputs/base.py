"""Abstract base class for auxiliary input providers."""

from abc import ABC, abstractmethod
from typing import Optional

from mdcompose.formatting.ir import AuxiliaryField


class AuxiliaryInput(ABC):
    """Supplies the extra values some format actions need.

    The engine asks for each value synchronously while computing a result.
    Returning None (or an empty string) means the user declined, which
    turns the whole action into a no-op.
    """

    @abstractmethod
    def ask(self, field: AuxiliaryField, default: Optional[str] = None) -> Optional[str]:
        """Request one value from the user.

        Args:
            field: Which value is being requested
            default: Value pre-filled in the prompt, if any

        Returns:
            The answer, or None if the prompt was cancelled
        """
        ...
