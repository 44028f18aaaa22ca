"""
Integration tests for task API endpoints.
"""
import json

from django.test import TestCase, Client

from apps.identity.models import EmployeeRole
from apps.identity.tests.factories import auth_header, make_employee
from apps.tasks.models import Task, TaskStatus


class TaskAPITest(TestCase):

    def setUp(self):
        self.client = Client()
        self.user = make_employee(name='Plain User', role=EmployeeRole.USER)
        self.colleague = make_employee(name='Colleague', role=EmployeeRole.USER)
        self.manager = make_employee(name='Manager', role=EmployeeRole.MANAGER)
        self.colleague_task = Task.objects.create(title='Colleague task', employee=self.colleague)

    def send(self, method, path, employee, payload=None):
        kwargs = auth_header(employee)
        if payload is not None:
            kwargs['data'] = json.dumps(payload)
            kwargs['content_type'] = 'application/json'
        return getattr(self.client, method)(path, **kwargs)

    def test_list_requires_auth(self):
        response = self.client.get('/api/tasks')
        self.assertEqual(response.status_code, 401)

    def test_create_task(self):
        response = self.send('post', '/api/tasks', self.manager, {
            'title': 'Quarterly report',
            'description': 'Numbers',
            'status': 'IN_PROGRESS',
            'dueDate': '2025-12-15',
            'employeeId': self.user.id,
        })
        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body['message'], 'Task created successfully')
        self.assertEqual(body['data']['dueDate'], '2025-12-15')
        self.assertEqual(body['data']['status'], 'IN_PROGRESS')
        self.assertEqual(body['data']['employee']['id'], self.user.id)

    def test_create_task_accepts_string_employee_id(self):
        response = self.send('post', '/api/tasks', self.user, {
            'title': 'From a form', 'employeeId': str(self.user.id),
        })
        self.assertEqual(response.status_code, 201)

    def test_create_task_unknown_employee(self):
        response = self.send('post', '/api/tasks', self.user, {'title': 'T', 'employeeId': 999999})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()['error'], 'Employee not found')

    def test_create_task_missing_title(self):
        response = self.send('post', '/api/tasks', self.user, {'employeeId': self.user.id})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], 'Title and Employee ID are required')

    def test_create_task_invalid_status(self):
        response = self.send('post', '/api/tasks', self.user, {
            'title': 'T', 'employeeId': self.user.id, 'status': 'BLOCKED',
        })
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], 'Invalid request data')

    def test_user_may_assign_to_others_but_only_sees_own(self):
        response = self.send('post', '/api/tasks', self.user, {
            'title': 'T', 'employeeId': self.colleague.id,
        })
        self.assertEqual(response.status_code, 201)
        own = Task.objects.create(title='Own', employee=self.user)

        response = self.send('get', f'/api/tasks?employeeId={self.colleague.id}', self.user)
        self.assertEqual(response.status_code, 200)
        data = response.json()['data']
        self.assertEqual([t['id'] for t in data], [own.id])

    def test_manager_filters(self):
        Task.objects.create(title='Done', employee=self.user, status=TaskStatus.DONE)
        response = self.send('get', f'/api/tasks?status=DONE&employeeId={self.user.id}', self.manager)
        data = response.json()['data']
        self.assertEqual([t['title'] for t in data], ['Done'])

    def test_get_task(self):
        response = self.send('get', f'/api/tasks/{self.colleague_task.id}', self.manager)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['data']['title'], 'Colleague task')

    def test_get_missing_task(self):
        response = self.send('get', '/api/tasks/999999', self.manager)
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {'success': False, 'error': 'Task not found'})

    def test_update_task(self):
        response = self.send('put', f'/api/tasks/{self.colleague_task.id}', self.manager, {'status': 'DONE'})
        self.assertEqual(response.status_code, 200)
        self.colleague_task.refresh_from_db()
        self.assertEqual(self.colleague_task.status, TaskStatus.DONE)
        self.assertEqual(self.colleague_task.title, 'Colleague task')

    def test_update_missing_task(self):
        response = self.send('put', '/api/tasks/999999', self.manager, {'status': 'DONE'})
        self.assertEqual(response.status_code, 404)

    def test_delete_task(self):
        response = self.send('delete', f'/api/tasks/{self.colleague_task.id}', self.manager)
        self.assertEqual(response.status_code, 200)
        self.assertFalse(Task.objects.filter(id=self.colleague_task.id).exists())

        response = self.send('delete', f'/api/tasks/{self.colleague_task.id}', self.manager)
        self.assertEqual(response.status_code, 404)
