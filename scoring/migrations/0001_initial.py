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
    ]

    operations = [
        migrations.CreateModel(
            name='MLVerification',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('carbon_estimate', models.DecimalField(decimal_places=3, max_digits=14, validators=[django.core.validators.MinValueValidator(0)])),
                ('biomass_health_score', models.DecimalField(decimal_places=3, max_digits=4, validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(1)])),
                ('evidence_cid', models.CharField(blank=True, max_length=128)),
                ('recommendation', models.CharField(choices=[('APPROVE', 'Approve'), ('REVIEW', 'Review'), ('REJECT', 'Reject')], max_length=10)),
                ('risk_factors', models.JSONField(blank=True, default=list)),
                ('model_version', models.CharField(max_length=50)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('project', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='ml_verifications', to='projects.project')),
                ('verifier', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='ml_verifications', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'ml_verifications',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['project', '-created_at'], name='ml_verif_project_created_idx')],
            },
        ),
    ]
