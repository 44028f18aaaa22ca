from datetime import date

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.identity.models import Employee, EmployeeRole
from apps.tasks.models import Task, TaskStatus

DEFAULT_PASSWORD = 'password123'

EMPLOYEES = [
    ('Admin User', 'admin@company.com', EmployeeRole.ADMIN),
    ('Jane Smith', 'jane.smith@company.com', EmployeeRole.MANAGER),
    ('Bob Johnson', 'bob.johnson@company.com', EmployeeRole.USER),
]

# (title, description, status, due date, index into EMPLOYEES)
TASKS = [
    ('Complete Q4 Sales Report',
     'Analyze sales data and prepare comprehensive report for stakeholders',
     TaskStatus.IN_PROGRESS, date(2025, 12, 15), 0),
    ('Update Employee Handbook',
     'Review and update company policies in the employee handbook',
     TaskStatus.TODO, date(2025, 12, 20), 1),
    ('Fix Bug in Payment Module',
     'Investigate and resolve the payment processing error reported by users',
     TaskStatus.DONE, date(2025, 11, 25), 2),
    ('Prepare Year-End Budget',
     'Create detailed budget projection for next fiscal year',
     TaskStatus.TODO, date(2025, 12, 30), 0),
    ('Conduct Team Training Session',
     'Organize and deliver training on new project management software',
     TaskStatus.IN_PROGRESS, date(2025, 12, 10), 1),
]


class Command(BaseCommand):
    help = 'Seeds the database with sample employees and tasks.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clean',
            action='store_true',
            help='Delete existing employees and tasks before seeding',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clean']:
            self.stdout.write(self.style.WARNING('Cleaning database...'))
            Task.objects.all().delete()
            Employee.objects.all().delete()
            self.stdout.write(self.style.SUCCESS('Database cleaned.'))

        employees = [self._get_or_create_employee(*spec) for spec in EMPLOYEES]

        created = 0
        for title, description, status, due_date, owner in TASKS:
            _, was_created = Task.objects.get_or_create(
                title=title,
                employee=employees[owner],
                defaults={
                    'description': description,
                    'status': status,
                    'due_date': due_date,
                },
            )
            created += was_created
        self.stdout.write(f'Created {created} tasks')

        self.stdout.write('Login credentials:')
        for name, email, role in EMPLOYEES:
            self.stdout.write(f'  {role.label}: {email} / {DEFAULT_PASSWORD}')
        self.stdout.write(self.style.SUCCESS('Seed completed successfully!'))

    def _get_or_create_employee(self, name, email, role):
        employee = Employee.objects.filter(email=email).first()
        if employee:
            self.stdout.write(f'  - Employee exists: {email}')
            return employee

        employee = Employee(name=name, email=email, role=role)
        employee.set_password(DEFAULT_PASSWORD)
        employee.save()
        self.stdout.write(self.style.SUCCESS(f'  + Created employee: {email} ({role})'))
        return employee
