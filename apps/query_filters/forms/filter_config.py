"""Design-time form for a taxonomy filter block's attributes."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from crispy_forms.helper import FormHelper
from crispy_forms.layout import Column, Fieldset, Layout as CrispyLayout, Row
from django import forms

from apps.query_filters.configs import INPUT_CHECKBOXES, INPUT_SELECT, FilterInstanceConfig
from apps.query_filters.models.term import TaxonomyChoices, is_hierarchical
from apps.query_filters.services.term_catalog import NOT_LOADED, ModelTermCatalog, TermCatalog, TermQuery
from apps.query_filters.services.term_resolver import resolve_term_ids, token_values

INPUT_TYPE_CHOICES = [
    (INPUT_SELECT, "Select (Single)"),
    (INPUT_CHECKBOXES, "Checkboxes (Multiple)"),
]


def next_instance_id(used: Iterable[Any]) -> int:
    """Smallest id above every id already used on the page."""

    ids = []
    for value in used or ():
        try:
            ids.append(int(value))
        except (TypeError, ValueError):
            continue
    return max(ids, default=0) + 1


def split_tokens(raw: str) -> list[str]:
    return [token.strip() for token in (raw or "").split(",") if token.strip()]


class FilterInstanceConfigForm(forms.Form):
    """Edit the attributes of one filter block.

    ``terms`` is a comma separated list of term names, resolved to ids via
    the term resolver. Switching taxonomy without touching ``terms`` clears
    the selection, since the old ids belong to the other taxonomy.
    """

    helper: FormHelper

    taxonomy_type = forms.ChoiceField(
        label="Taxonomy Type",
        choices=TaxonomyChoices.choices,
        required=False,
    )
    include_all_terms = forms.BooleanField(label="Include All Tags", required=False)
    terms = forms.CharField(label="Terms", required=False)
    child_only = forms.BooleanField(
        label="Child Categories Only",
        required=False,
        help_text="Offer the child categories of the selected categories instead of the categories themselves.",
    )
    label = forms.CharField(label="Default Label", required=False, max_length=255)
    input_type = forms.ChoiceField(label="Input Type", choices=INPUT_TYPE_CHOICES, initial=INPUT_SELECT)

    def __init__(
        self,
        *args: Any,
        attributes: Optional[Mapping[str, Any]] = None,
        catalog: Optional[TermCatalog] = None,
        used_instance_ids: Iterable[Any] = (),
        **kwargs: Any,
    ) -> None:
        self.original = FilterInstanceConfig.from_attributes(attributes)
        self.catalog = catalog or ModelTermCatalog()
        self.used_instance_ids = list(used_instance_ids)
        kwargs.setdefault("initial", self._initial_from(self.original))
        super().__init__(*args, **kwargs)
        self.helper = FormHelper()
        self.helper.form_tag = False
        self.helper.disable_csrf = True
        self.helper.layout = CrispyLayout(
            Fieldset(
                "Settings",
                "taxonomy_type",
                "include_all_terms",
                "terms",
                "child_only",
                Row(
                    Column("label", css_class="col-md-6"),
                    Column("input_type", css_class="col-md-6"),
                ),
            ),
        )

    def _catalog_terms(self, taxonomy: str):
        return self.catalog.fetch(taxonomy, TermQuery.all())

    def _initial_from(self, config: FilterInstanceConfig) -> dict[str, Any]:
        records = self._catalog_terms(config.taxonomy_type)
        tokens = [] if records is NOT_LOADED else token_values(records, config.selected_term_ids)
        return {
            "taxonomy_type": config.taxonomy_type,
            "include_all_terms": config.include_all_terms,
            "terms": ", ".join(token["value"] for token in tokens),
            "child_only": config.child_only,
            "label": config.label,
            "input_type": config.input_type,
        }

    def clean(self) -> dict[str, Any]:
        cleaned = super().clean()
        taxonomy = cleaned.get("taxonomy_type") or TaxonomyChoices.CATEGORY.value
        cleaned["taxonomy_type"] = taxonomy

        raw_terms = cleaned.get("terms") or ""
        taxonomy_changed = taxonomy != self.original.taxonomy_type
        if taxonomy_changed and raw_terms == (self.initial.get("terms") or ""):
            raw_terms = ""

        records = self._catalog_terms(taxonomy)
        if records is NOT_LOADED:
            raise forms.ValidationError("Terms are still loading, try again shortly.")
        cleaned["selected_term_ids"] = tuple(resolve_term_ids(records, split_tokens(raw_terms)))

        if not is_hierarchical(taxonomy):
            cleaned["child_only"] = False
        else:
            cleaned["include_all_terms"] = False
        return cleaned

    def to_config(self) -> FilterInstanceConfig:
        if not self.is_valid():
            raise ValueError("Cannot build a config from an invalid form")
        data = self.cleaned_data
        instance_id = self.original.instance_id
        if instance_id is None:
            instance_id = next_instance_id(self.used_instance_ids)
        return FilterInstanceConfig(
            instance_id=instance_id,
            taxonomy_type=data["taxonomy_type"],
            label=data.get("label") or "",
            input_type=data.get("input_type") or INPUT_SELECT,
            child_only=bool(data.get("child_only")),
            include_all_terms=bool(data.get("include_all_terms")),
            selected_term_ids=data["selected_term_ids"],
        )
