from django.test import SimpleTestCase, TestCase, Client

from apps.dashboard.services import completion_rate, get_dashboard_stats
from apps.identity.models import EmployeeRole
from apps.identity.tests.factories import auth_header, make_employee
from apps.tasks.models import Task, TaskStatus


class CompletionRateTest(SimpleTestCase):

    def test_zero_when_no_tasks(self):
        self.assertEqual(completion_rate(0, 0), 0)

    def test_matches_rounded_percentage(self):
        for total in range(1, 60):
            for done in range(total + 1):
                expected = int(done * 100 / total + 0.5)
                self.assertEqual(completion_rate(total, done), expected, (total, done))

    def test_half_rounds_up(self):
        # 1/8 = 12.5%
        self.assertEqual(completion_rate(8, 1), 13)
        self.assertEqual(completion_rate(200, 1), 1)


class DashboardStatsTest(TestCase):

    def setUp(self):
        self.admin = make_employee(name='Admin', role=EmployeeRole.ADMIN)
        self.user = make_employee(name='User')

    def test_empty_dashboard(self):
        Task.objects.all().delete()
        stats = get_dashboard_stats()
        self.assertEqual(stats['totalTasks'], 0)
        self.assertEqual(stats['completionRate'], 0)
        self.assertEqual(stats['recentTasks'], [])
        self.assertEqual(stats['totalEmployees'], 2)

    def test_counts_and_recent_tasks(self):
        statuses = [TaskStatus.DONE, TaskStatus.DONE, TaskStatus.TODO,
                    TaskStatus.IN_PROGRESS, TaskStatus.TODO, TaskStatus.DONE]
        for i, status in enumerate(statuses):
            Task.objects.create(title=f'Task {i}', status=status, employee=self.user)

        stats = get_dashboard_stats()
        self.assertEqual(stats['totalTasks'], 6)
        self.assertEqual(stats['completedTasks'], 3)
        self.assertEqual(stats['todoTasks'], 2)
        self.assertEqual(stats['inProgressTasks'], 1)
        self.assertEqual(stats['completionRate'], 50)

        recent = stats['recentTasks']
        self.assertEqual([t['title'] for t in recent], ['Task 5', 'Task 4', 'Task 3', 'Task 2', 'Task 1'])
        self.assertEqual(recent[0]['employee'], {
            'id': self.user.id, 'name': self.user.name, 'email': self.user.email,
        })

    def test_endpoint(self):
        Task.objects.create(title='Only', status=TaskStatus.DONE, employee=self.user)
        client = Client()

        self.assertEqual(client.get('/api/dashboard').status_code, 401)

        response = client.get('/api/dashboard', **auth_header(self.user))
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body['success'])
        self.assertEqual(body['data']['completionRate'], 100)
