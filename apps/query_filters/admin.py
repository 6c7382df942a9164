from django.contrib import admin
from .models import Page, Post, Term


@admin.register(Term)
class TermAdmin(admin.ModelAdmin):
    list_display = ("name", "taxonomy", "slug", "parent")
    search_fields = ("name", "slug",)
    list_filter = ("taxonomy",)
    prepopulated_fields = {"slug": ("name",)}


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ("title", "slug", "published_at")
    search_fields = ("title",)
    list_filter = ("terms",)
    filter_horizontal = ("terms",)


@admin.register(Page)
class PageAdmin(admin.ModelAdmin):
    list_display = ("title", "slug", "updated_at")
    search_fields = ("title", "slug",)
