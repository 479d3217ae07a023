from dataclasses import dataclass, replace
from enum import Enum


class FormPhase(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"


@dataclass(frozen=True)
class FormState:
    """UI state of one form instance.

    ``loading`` disables the submit and delete controls while a request is
    in flight; ``delete_confirm_open`` gates the destructive-action dialog.
    """

    phase: FormPhase = FormPhase.IDLE
    delete_confirm_open: bool = False

    @property
    def loading(self) -> bool:
        return self.phase is FormPhase.SUBMITTING

    def submitting(self) -> "FormState":
        return replace(self, phase=FormPhase.SUBMITTING)

    def idle(self) -> "FormState":
        return replace(self, phase=FormPhase.IDLE)

    def with_delete_confirm(self, open_: bool) -> "FormState":
        return replace(self, delete_confirm_open=open_)
