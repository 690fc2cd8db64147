import decimal

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models

import projects.models.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Project',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=255, validators=[projects.models.validators.validate_not_blank])),
                ('description', models.TextField(blank=True)),
                ('owner_id', models.CharField(db_index=True, max_length=64)),
                ('logo_url', models.CharField(blank=True, max_length=500)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'projects',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='Status',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=50, validators=[projects.models.validators.validate_not_blank])),
                ('order', models.IntegerField(default=0)),
                ('is_done', models.BooleanField(default=False)),
                ('project', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='statuses', to='projects.project')),
            ],
            options={
                'db_table': 'statuses',
                'ordering': ['order'],
                'indexes': [models.Index(fields=['project', 'order'], name='statuses_project_order_idx')],
                'unique_together': {('name', 'project')},
            },
        ),
        migrations.CreateModel(
            name='File',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('state', models.CharField(choices=[('ACTIVE', 'Active'), ('DELETED', 'Deleted')], db_index=True, default='ACTIVE', max_length=10)),
                ('filename', models.CharField(max_length=255, validators=[projects.models.validators.validate_not_blank])),
                ('filepath', models.CharField(max_length=500)),
                ('user_id', models.CharField(db_index=True, max_length=64)),
                ('added_by', models.CharField(max_length=64)),
                ('added_on', models.DateTimeField(default=django.utils.timezone.now)),
                ('updated_by', models.CharField(blank=True, max_length=64)),
                ('updated_on', models.DateTimeField(blank=True, null=True)),
                ('project', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='files', to='projects.project')),
            ],
            options={
                'db_table': 'files',
                'ordering': ['-added_on'],
                'indexes': [models.Index(fields=['project', 'state'], name='files_project_state_idx')],
            },
        ),
        migrations.AddField(
            model_name='project',
            name='logo',
            field=models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to='projects.file'),
        ),
        migrations.CreateModel(
            name='Task',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=255, validators=[projects.models.validators.validate_not_blank])),
                ('description', models.TextField(blank=True)),
                ('assigned_to', models.CharField(blank=True, db_index=True, max_length=64)),
                ('total_hours', models.DecimalField(decimal_places=2, default=decimal.Decimal('0'), max_digits=12)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('project', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='tasks', to='projects.project')),
                ('status', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='tasks', to='projects.status')),
            ],
            options={
                'db_table': 'tasks',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['project', 'status'], name='tasks_project_status_idx')],
            },
        ),
        migrations.CreateModel(
            name='TimeLog',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('state', models.CharField(choices=[('ACTIVE', 'Active'), ('DELETED', 'Deleted')], db_index=True, default='ACTIVE', max_length=10)),
                ('user_id', models.CharField(db_index=True, max_length=64)),
                ('hours', models.DecimalField(decimal_places=2, max_digits=7, validators=[projects.models.validators.validate_positive])),
                ('date', models.DateField()),
                ('description', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('task', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='time_logs', to='projects.task')),
            ],
            options={
                'db_table': 'time_logs',
                'ordering': ['-date', '-created_at'],
                'indexes': [
                    models.Index(fields=['task', 'state'], name='time_logs_task_state_idx'),
                    models.Index(fields=['user_id', '-date'], name='time_logs_user_date_idx'),
                ],
            },
        ),
    ]
