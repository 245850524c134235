from django.contrib import admin

from events.models import Band, Event, Member


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "nb_stars", "img_url"]
    search_fields = ["title", "bands__members__name"]
    filter_horizontal = ["bands"]


@admin.register(Band)
class BandAdmin(admin.ModelAdmin):
    list_display = ["name"]
    search_fields = ["name", "members__name"]
    filter_horizontal = ["members"]


@admin.register(Member)
class MemberAdmin(admin.ModelAdmin):
    list_display = ["name"]
    search_fields = ["name"]
