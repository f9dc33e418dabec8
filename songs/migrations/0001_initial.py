from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Song",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("group_name", models.TextField()),
                ("song_name", models.TextField()),
                ("release_date", models.TextField(blank=True, default="", null=True)),
                ("text", models.TextField(blank=True, default="", null=True)),
                ("link", models.TextField(blank=True, default="", null=True)),
            ],
            options={
                "db_table": "songs",
                "ordering": ["id"],
            },
        ),
    ]
