"""Configuration for the Query Filters Django application."""

from django.apps import AppConfig


class QueryFiltersConfig(AppConfig):
    """Application configuration for listing taxonomy filters."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.query_filters"
    verbose_name = "Query Taxonomy Filters"
