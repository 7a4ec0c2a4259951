from django.contrib import admin

from exhibitions.models import ArDesign, Exhibition, ExhibitionInformation, Exhibitor


class ExhibitionInline(admin.TabularInline):
    model = Exhibition
    fk_name = "exhibitor"
    extra = 0
    fields = ["information", "is_draft", "is_published", "published_at"]
    readonly_fields = fields


@admin.register(Exhibitor)
class ExhibitorAdmin(admin.ModelAdmin):
    list_display = ["name", "created_at"]
    search_fields = ["name"]
    exclude = ["password_hash"]
    inlines = [ExhibitionInline]


@admin.register(ExhibitionInformation)
class ExhibitionInformationAdmin(admin.ModelAdmin):
    list_display = ["title", "exhibitor_name", "category", "location", "price"]
    list_filter = ["category"]
    search_fields = ["title", "exhibitor_name", "comment"]
    exclude = ["image"]


@admin.register(Exhibition)
class ExhibitionAdmin(admin.ModelAdmin):
    list_display = ["id", "exhibitor", "is_draft", "is_published", "published_at"]
    list_filter = ["is_published", "is_draft"]
    # Lifecycle flags only change through the API so transitions stay valid.
    readonly_fields = ["is_draft", "is_published", "published_at"]


@admin.register(ArDesign)
class ArDesignAdmin(admin.ModelAdmin):
    list_display = ["id", "url"]
