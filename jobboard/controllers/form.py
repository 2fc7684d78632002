"""
Form controller.

Tracks field values, touched fields, validation errors and the submission
window for one form. Errors are only shown for fields the user has left at
least once, until a submit attempt makes every field eligible.
"""

import inspect
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from jobboard.controllers.values import FieldValue, FileRef, Flag, field_value, to_plain, wrap_values

logger = logging.getLogger(__name__)

Validator = Callable[[dict[str, FieldValue]], dict[str, str]]
SubmitCallback = Callable[[dict[str, FieldValue]], Awaitable[None] | None]


class FormController:
    """Value, validation and submission state for a single form.

    Args:
        initial_values: Field name -> initial value (plain or FieldValue)
        validate: Pure function from all values to a complete errors map
        on_submit: Called with the values once validation passes; may be async
    """

    def __init__(self, initial_values: dict[str, Any], validate: Validator, on_submit: SubmitCallback):
        self._initial = wrap_values(initial_values)
        self.validate = validate
        self.on_submit = on_submit

        self.values: dict[str, FieldValue] = dict(self._initial)
        self.errors: dict[str, str] = {}
        self.touched: set[str] = set()
        self.is_submitting = False

    def handle_change(self, name: str, value: Any, input_type: str = "text", checked: bool = False) -> None:
        """Store a field's new value; checkboxes store their checked state."""
        if input_type == "checkbox":
            self._set(name, Flag(bool(checked)))
        else:
            self._set(name, field_value(value))

    def handle_file_change(self, name: str, files: Sequence[Any]) -> None:
        """Store the first selected file. An empty selection keeps the previous value."""
        if not files:
            logger.debug(f"Empty file selection for '{name}', keeping previous value")
            return
        self._set(name, FileRef(files[0]))

    def handle_blur(self, name: str) -> None:
        self.touched.add(name)
        self._revalidate_touched()

    async def handle_submit(self) -> bool:
        """Validate every field and call on_submit only if nothing failed.

        Returns True when on_submit was invoked. Exceptions raised by
        on_submit are not caught here.
        """
        self.touched = set(self.values)
        self.is_submitting = True
        try:
            self.errors = dict(self.validate(dict(self.values)))
        finally:
            self.is_submitting = False

        if self.errors:
            logger.debug(f"Submit blocked by {len(self.errors)} invalid field(s): {sorted(self.errors)}")
            return False

        result = self.on_submit(dict(self.values))
        if inspect.isawaitable(result):
            await result
        return True

    def reset_form(self) -> None:
        self.values = dict(self._initial)
        self.errors = {}
        self.touched = set()
        self.is_submitting = False

    def set_value(self, name: str, value: Any) -> None:
        """Set a field directly, for inputs that don't produce change events."""
        self._set(name, field_value(value))

    def error_for(self, name: str) -> str | None:
        return self.errors.get(name)

    @property
    def plain_values(self) -> dict[str, Any]:
        return to_plain(self.values)

    def _set(self, name: str, value: FieldValue) -> None:
        self.values = {**self.values, name: value}
        self._revalidate_touched()

    def _revalidate_touched(self) -> None:
        if not self.touched:
            return
        all_errors = self.validate(dict(self.values))
        self.errors = {k: msg for k, msg in all_errors.items() if k in self.touched}
