from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Account",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("created_by", models.CharField(editable=False, max_length=50)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "updated_by",
                    models.CharField(blank=True, default="", max_length=50),
                ),
                (
                    "account_number",
                    models.BigIntegerField(primary_key=True, serialize=False),
                ),
                ("customer_id", models.BigIntegerField(db_index=True)),
                ("account_type", models.CharField(max_length=100)),
                ("branch_address", models.CharField(max_length=200)),
            ],
            options={
                "db_table": "accounts",
                "ordering": ["account_number"],
            },
        ),
    ]
