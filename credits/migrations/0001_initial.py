import uuid

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('projects', '0001_initial'),
        ('mrv', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='CarbonCredit',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('amount', models.DecimalField(decimal_places=3, max_digits=14, validators=[django.core.validators.MinValueValidator(0)])),
                ('remaining_balance', models.DecimalField(decimal_places=3, max_digits=14, validators=[django.core.validators.MinValueValidator(0)])),
                ('available_balance', models.DecimalField(decimal_places=3, max_digits=14, validators=[django.core.validators.MinValueValidator(0)])),
                ('is_retired', models.BooleanField(db_index=True, default=False)),
                ('health_score', models.DecimalField(decimal_places=3, max_digits=4)),
                ('evidence_cid', models.CharField(blank=True, max_length=128)),
                ('verified_at', models.DateTimeField(blank=True, null=True)),
                ('on_chain_tx_hash', models.CharField(blank=True, max_length=66, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('mrv', models.OneToOneField(on_delete=django.db.models.deletion.PROTECT, related_name='credit', to='mrv.mrvdata')),
                ('owner', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='owned_credits', to=settings.AUTH_USER_MODEL)),
                ('project', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='credits', to='projects.project')),
            ],
            options={
                'db_table': 'carbon_credits',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['is_retired', 'owner'], name='credit_market_idx')],
            },
        ),
        migrations.CreateModel(
            name='CreditHolding',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('balance', models.DecimalField(decimal_places=3, default=0, max_digits=14, validators=[django.core.validators.MinValueValidator(0)])),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('buyer', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='credit_holdings', to=settings.AUTH_USER_MODEL)),
                ('credit', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='holdings', to='credits.carboncredit')),
            ],
            options={
                'db_table': 'credit_holdings',
                'ordering': ['-updated_at'],
                'constraints': [models.UniqueConstraint(fields=('credit', 'buyer'), name='unique_credit_holding')],
            },
        ),
        migrations.CreateModel(
            name='Retirement',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('amount', models.DecimalField(decimal_places=3, max_digits=14, validators=[django.core.validators.MinValueValidator(0)])),
                ('reason', models.TextField()),
                ('retired_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('on_chain_tx_hash', models.CharField(blank=True, max_length=66, null=True)),
                ('buyer', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='retirements', to=settings.AUTH_USER_MODEL)),
                ('credit', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='retirements', to='credits.carboncredit')),
            ],
            options={
                'db_table': 'retirements',
                'ordering': ['-retired_at'],
                'indexes': [models.Index(fields=['buyer', '-retired_at'], name='retirement_buyer_idx')],
            },
        ),
    ]
