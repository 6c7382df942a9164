"""Selection state for a single filter control on one page view."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from apps.query_filters.configs import INPUT_CHECKBOXES
from apps.query_filters.services.url_params import Selection, read_selection


@dataclass
class Control:
    """A rendered form control as seen by a change handler."""

    value: str = ""
    tag: str = "select"
    type: str = ""
    name: str = ""
    checked: bool = False

    @property
    def is_checkbox(self) -> bool:
        return self.tag.lower() == "input" and self.type.lower() == "checkbox"


@dataclass
class ChangeEvent:
    """A change on ``target``; ``controls`` are all controls in the document."""

    target: Control
    controls: Sequence[Control] = field(default_factory=tuple)


class FilterStateStore:
    """Holds the applied selection of one filter instance.

    ``has_hydrated`` belongs to the instance so that several filters on one
    page each skip their own first synchronization pass.
    """

    def __init__(self, input_type: str, initial: Selection | None = None):
        self.input_type = input_type
        self.has_hydrated = False
        if initial is None:
            initial = [] if self.multiple else ""
        self._selection: Selection = self._normalize(initial)

    @classmethod
    def from_url(cls, url: str, list_id: str, instance_id, input_type: str) -> "FilterStateStore":
        multiple = input_type == INPUT_CHECKBOXES
        return cls(input_type, read_selection(url, list_id, instance_id, multiple=multiple))

    @property
    def multiple(self) -> bool:
        return self.input_type == INPUT_CHECKBOXES

    def _normalize(self, value) -> Selection:
        if isinstance(value, (list, tuple)):
            return [str(v) for v in value]
        if value is None:
            return ""
        return str(value)

    def current_selection(self) -> Selection:
        if isinstance(self._selection, list):
            return list(self._selection)
        return self._selection

    def set_selection(self, value: Selection) -> None:
        self._selection = self._normalize(value)

    def mark_hydrated(self) -> None:
        self.has_hydrated = True

    def handle_change(self, event: ChangeEvent) -> Selection:
        """Update the selection from a change event and return it.

        For checkboxes every checkbox in the same group is re-read, not just
        the toggled one.
        """

        target = event.target
        if target.is_checkbox:
            group = target.name
            self.set_selection(
                [
                    control.value
                    for control in event.controls
                    if control.is_checkbox and control.name == group and control.checked
                ]
            )
        else:
            self.set_selection(target.value)
        return self.current_selection()


__all__ = ["Selection", "Control", "ChangeEvent", "FilterStateStore"]
