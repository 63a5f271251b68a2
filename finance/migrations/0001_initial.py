from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Fee',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('student_id', models.CharField(max_length=50)),
                ('student', models.CharField(max_length=200)),
                ('term', models.CharField(blank=True, default=None, max_length=50, null=True)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=10)),
                ('status', models.CharField(choices=[('PAID', 'Paid'), ('DUE', 'Due'), ('PENDING', 'Pending')], default='DUE', max_length=10)),
                ('date', models.CharField(max_length=30)),
                ('fee_type', models.CharField(choices=[('Term Fee', 'Term Fee'), ('Registration Fee', 'Registration Fee'), ('Other Fee', 'Other Fee')], default='Term Fee', max_length=30)),
                ('payment_method', models.CharField(blank=True, choices=[('CARD', 'Card'), ('BANK', 'Bank Transfer'), ('CASH', 'Cash')], max_length=10)),
                ('paid_date', models.DateTimeField(blank=True, null=True)),
                ('verified_by', models.CharField(blank=True, max_length=100)),
                ('notes', models.TextField(blank=True)),
            ],
            options={
                'ordering': ['id'],
            },
        ),
    ]
