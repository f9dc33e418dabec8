from django.db import models

# songs/models.py


class Song(models.Model):
    group_name = models.TextField()
    song_name = models.TextField()
    # Filled from the song details lookup; NULLs only come from outside writers
    release_date = models.TextField(null=True, blank=True, default="")
    text = models.TextField(null=True, blank=True, default="")
    link = models.TextField(null=True, blank=True, default="")

    class Meta:
        db_table = "songs"
        ordering = ["id"]

    def __str__(self):
        return f"{self.group_name} - {self.song_name}"
