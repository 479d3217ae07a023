"""Form controller: the submit/delete behavior of the dashboard's entity forms.

One controller per form instance. It validates values with the entity's
form schema, calls the API, and drives navigation and notifications
through the injected ``Navigator`` and ``Notifier``. A 409 from the API
means the row is locked; every other failure collapses to one generic
message.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Protocol

from pydantic import ValidationError as PydanticValidationError

from .api_client import ApiError, CatalogApiClient
from .definitions import EntityForm
from .state import FormState

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong."
LOCKED_UPDATE_MESSAGE = "Locked items can't be modified."
LOCKED_DELETE_MESSAGE = "Locked items can't be deleted."


class Navigator(Protocol):
    def push(self, path: str) -> None: ...

    def refresh(self) -> None: ...


class Notifier(Protocol):
    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class Outcome(str, Enum):
    SAVED = "saved"
    DELETED = "deleted"
    LOCKED = "locked"
    FAILED = "failed"
    INVALID = "invalid"
    IGNORED = "ignored"  # a request was already in flight


@dataclass
class FormResult:
    outcome: Outcome
    data: Any = None
    field_errors: Dict[str, str] = field(default_factory=dict)
    status_code: Optional[int] = None


class FormController:
    def __init__(
        self,
        form: EntityForm,
        api: CatalogApiClient,
        navigator: Navigator,
        notifier: Notifier,
        store_id: str,
        initial_data: Optional[Mapping[str, Any]] = None,
    ):
        self.form = form
        self.api = api
        self.navigator = navigator
        self.notifier = notifier
        self.store_id = store_id
        self.initial_data = dict(initial_data) if initial_data else None
        self.state = FormState()

    @property
    def editing(self) -> bool:
        return self.initial_data is not None

    @property
    def entity_id(self) -> Optional[str]:
        return self.initial_data.get("id") if self.initial_data else None

    @property
    def title(self) -> str:
        return f"Edit {self.form.label_lower}" if self.editing else f"Create {self.form.label_lower}"

    @property
    def description(self) -> str:
        return f"Edit a {self.form.label_lower}" if self.editing else f"Add a new {self.form.label_lower}"

    @property
    def action(self) -> str:
        return "Save changes" if self.editing else "Create"

    @property
    def success_message(self) -> str:
        return f"{self.form.label} updated." if self.editing else f"{self.form.label} created."

    @property
    def list_path(self) -> str:
        return f"/{self.store_id}/{self.form.entity}"

    def validate(self, values: Mapping[str, Any]):
        """Return (form_values, {}) or (None, {field: message})."""
        try:
            return self.form.values.model_validate(dict(values)), {}
        except PydanticValidationError as e:
            errors = {}
            for error in e.errors():
                name = ".".join(str(part) for part in error["loc"]) or "__root__"
                errors.setdefault(name, error["msg"])
            return None, errors

    def _leave_to_list(self) -> None:
        self.navigator.push(self.list_path)
        self.navigator.refresh()

    def submit(self, values: Mapping[str, Any]) -> FormResult:
        if self.state.loading:
            return FormResult(Outcome.IGNORED)
        form_values, errors = self.validate(values)
        if form_values is None:
            return FormResult(Outcome.INVALID, field_errors=errors)

        self.state = self.state.submitting()
        try:
            payload = form_values.to_payload()
            if self.editing:
                data = self.api.update(self.store_id, self.form.entity, self.entity_id, payload)
            else:
                data = self.api.create(self.store_id, self.form.entity, payload)
            self._leave_to_list()
            self.notifier.success(self.success_message)
            return FormResult(Outcome.SAVED, data=data)
        except ApiError as e:
            if e.is_conflict:
                self._leave_to_list()
                self.notifier.error(LOCKED_UPDATE_MESSAGE)
                return FormResult(Outcome.LOCKED, status_code=e.status_code)
            logger.warning(f"Saving {self.form.label_lower} failed with {e.status_code}")
            self.notifier.error(GENERIC_ERROR_MESSAGE)
            return FormResult(Outcome.FAILED, status_code=e.status_code)
        finally:
            self.state = self.state.idle()

    def open_delete_confirm(self) -> None:
        if self.editing:
            self.state = self.state.with_delete_confirm(True)

    def close_delete_confirm(self) -> None:
        self.state = self.state.with_delete_confirm(False)

    def confirm_delete(self) -> FormResult:
        if self.state.loading or not self.editing:
            return FormResult(Outcome.IGNORED)

        self.state = self.state.submitting()
        try:
            data = self.api.delete(self.store_id, self.form.entity, self.entity_id)
            self._leave_to_list()
            self.notifier.success(f"{self.form.label} deleted.")
            return FormResult(Outcome.DELETED, data=data)
        except ApiError as e:
            if e.is_conflict:
                self._leave_to_list()
                self.notifier.error(LOCKED_DELETE_MESSAGE)
                return FormResult(Outcome.LOCKED, status_code=e.status_code)
            logger.warning(f"Deleting {self.form.label_lower} failed with {e.status_code}")
            self.notifier.error(self.form.delete_blocked_message)
            return FormResult(Outcome.FAILED, status_code=e.status_code)
        finally:
            self.state = self.state.idle().with_delete_confirm(False)
