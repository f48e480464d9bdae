from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="DummyProduct",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("price_cents", models.IntegerField()),
                ("currency", models.CharField(blank=True, max_length=3, null=True)),
            ],
            options={
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("price_cents", models.IntegerField()),
                ("discount", models.IntegerField()),
                ("bonus_cents", models.IntegerField()),
                ("optional_price_cents", models.IntegerField(blank=True, null=True)),
            ],
            options={
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Transaction",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("amount_cents", models.IntegerField()),
                ("tax_cents", models.IntegerField()),
                ("currency", models.CharField(blank=True, max_length=3, null=True)),
            ],
            options={
                "abstract": False,
            },
        ),
    ]
