"""Typed records for filter block attributes and term catalog entries."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from apps.query_filters.models.term import TaxonomyChoices

INPUT_SELECT = "select"
INPUT_CHECKBOXES = "checkboxes"
INPUT_TYPES = (INPUT_SELECT, INPUT_CHECKBOXES)

DEFAULT_TAXONOMY = TaxonomyChoices.CATEGORY.value


@dataclass(frozen=True)
class TermRecord:
    """A catalog entry: stable id, display name and optional parent id."""

    id: int
    name: str
    parent_id: Optional[int] = None

    @classmethod
    def from_model(cls, term) -> "TermRecord":
        return cls(id=term.pk, name=term.name, parent_id=term.parent_id)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TermRecord":
        parent = data.get("parent_id", data.get("parent"))
        return cls(id=data["id"], name=str(data.get("name", "")), parent_id=parent or None)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "on", "yes"}
    return bool(value)


def _as_id_tuple(values: Any) -> Tuple[int, ...]:
    if not isinstance(values, (list, tuple)):
        return ()
    ids = []
    for value in values:
        try:
            ids.append(int(value))
        except (TypeError, ValueError):
            continue
    return tuple(ids)


@dataclass(frozen=True)
class FilterInstanceConfig:
    """Design-time attributes of one placed filter control."""

    instance_id: Optional[int]
    taxonomy_type: str = DEFAULT_TAXONOMY
    label: str = ""
    input_type: str = INPUT_SELECT
    child_only: bool = False
    include_all_terms: bool = False
    selected_term_ids: Tuple[int, ...] = ()

    @property
    def multiple(self) -> bool:
        return self.input_type == INPUT_CHECKBOXES

    @classmethod
    def from_attributes(cls, attrs: Mapping[str, Any] | None) -> "FilterInstanceConfig":
        """Build a config from raw block ``attrs`` applying editor defaults.

        Unknown input types fall back to a single select; an empty taxonomy
        falls back to ``category``.
        """

        attrs = attrs or {}
        raw_instance = attrs.get("instanceId")
        try:
            instance_id = int(raw_instance) if raw_instance not in (None, "") else None
        except (TypeError, ValueError):
            instance_id = None
        input_type = str(attrs.get("inputType") or INPUT_SELECT)
        if input_type not in INPUT_TYPES:
            input_type = INPUT_SELECT
        return cls(
            instance_id=instance_id,
            taxonomy_type=str(attrs.get("selectedTaxonomyType") or DEFAULT_TAXONOMY),
            label=str(attrs.get("label") or ""),
            input_type=input_type,
            child_only=_as_bool(attrs.get("childOnly", False)),
            include_all_terms=_as_bool(attrs.get("allTags", False)),
            selected_term_ids=_as_id_tuple(attrs.get("selectedTerms")),
        )

    def to_attributes(self) -> dict[str, Any]:
        return {
            "instanceId": self.instance_id,
            "selectedTaxonomyType": self.taxonomy_type,
            "label": self.label,
            "inputType": self.input_type,
            "childOnly": self.child_only,
            "allTags": self.include_all_terms,
            "selectedTerms": list(self.selected_term_ids),
        }


__all__ = [
    "INPUT_SELECT",
    "INPUT_CHECKBOXES",
    "INPUT_TYPES",
    "DEFAULT_TAXONOMY",
    "TermRecord",
    "FilterInstanceConfig",
]
