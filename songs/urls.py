from django.urls import path

from . import views

urlpatterns = [
    path("songs", views.SongListView.as_view(), name="song_list"),
    path("songs/<str:song_id>", views.SongDetailView.as_view(), name="song_detail"),
]
