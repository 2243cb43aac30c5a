"""Non-interactive input providers."""

from typing import Mapping, Optional, Union

from mdcompose.formatting.ir import AuxiliaryField
from mdcompose.inputs.base import AuxiliaryInput


class DecliningInput(AuxiliaryInput):
    """Provider that cancels every prompt."""

    def ask(self, field: AuxiliaryField, default: Optional[str] = None) -> Optional[str]:
        return None


class ScriptedInput(AuxiliaryInput):
    """Provider that answers from a fixed mapping.

    Fields missing from the mapping are answered with the prompt's default,
    the same as a user pressing enter on a pre-filled dialog. Answers that
    are explicitly None stay cancelled.

    Attributes:
        answers: Mapping of field to answer
        asked: Fields requested so far, in order
    """

    def __init__(
        self,
        answers: Optional[Mapping[Union[AuxiliaryField, str], Optional[str]]] = None,
    ) -> None:
        self.answers: dict[AuxiliaryField, Optional[str]] = {
            AuxiliaryField(key): value for key, value in (answers or {}).items()
        }
        self.asked: list[AuxiliaryField] = []

    def ask(self, field: AuxiliaryField, default: Optional[str] = None) -> Optional[str]:
        self.asked.append(field)
        if field in self.answers:
            return self.answers[field]
        return default
