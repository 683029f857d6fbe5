from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("brands", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="BrandSupplier",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("name", models.CharField(help_text="Supplier display name", max_length=100)),
                ("contact_person", models.CharField(blank=True, max_length=100, null=True)),
                ("email", models.EmailField(max_length=100, unique=True)),
                ("phone", models.CharField(blank=True, max_length=10, null=True)),
                ("address", models.TextField(blank=True, null=True)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField()),
                ("updated_at", models.DateTimeField()),
                (
                    "brand",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="suppliers",
                        to="brands.brand",
                    ),
                ),
            ],
            options={
                "db_table": "brand_suppliers",
                "ordering": ["id"],
                "indexes": [
                    models.Index(
                        fields=["brand", "is_active"], name="supplier_brand_active_idx"
                    ),
                    models.Index(fields=["is_active"], name="supplier_active_idx"),
                ],
            },
        ),
    ]
