"""
Integration tests for auth endpoints and the bearer-token gate.
"""
import json
from datetime import timedelta

from django.test import TestCase, Client

from apps.identity.jwt_auth import issue_token, verify_token
from apps.identity.models import Employee, EmployeeRole
from .factories import auth_header, make_employee


class RegisterLoginTest(TestCase):

    def setUp(self):
        self.client = Client()

    def post(self, path, payload):
        return self.client.post(path, data=json.dumps(payload), content_type='application/json')

    def test_register_login_me_flow(self):
        response = self.post('/api/auth/register', {
            'name': 'A', 'email': 'a@x.com', 'password': 'pw123456',
        })
        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertTrue(body['success'])
        user_id = body['data']['user']['id']
        self.assertEqual(verify_token(body['data']['token']), user_id)

        response = self.post('/api/auth/login', {'email': 'a@x.com', 'password': 'pw123456'})
        self.assertEqual(response.status_code, 200)
        login_data = response.json()['data']
        self.assertEqual(login_data['user']['id'], user_id)
        self.assertEqual(verify_token(login_data['token']), user_id)

        response = self.client.get(
            '/api/auth/me',
            HTTP_AUTHORIZATION=f"Bearer {login_data['token']}",
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['data'], {
            'id': user_id, 'name': 'A', 'email': 'a@x.com', 'role': 'USER',
        })

    def test_register_stores_hashed_password(self):
        self.post('/api/auth/register', {'name': 'A', 'email': 'a@x.com', 'password': 'pw123456'})
        employee = Employee.objects.get(email='a@x.com')
        self.assertNotEqual(employee.password, 'pw123456')
        self.assertTrue(employee.check_password('pw123456'))

    def test_register_with_role(self):
        response = self.post('/api/auth/register', {
            'name': 'M', 'email': 'm@x.com', 'password': 'pw123456', 'role': 'MANAGER',
        })
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()['data']['user']['role'], EmployeeRole.MANAGER)

    def test_register_duplicate_email(self):
        make_employee(email='a@x.com')
        response = self.post('/api/auth/register', {
            'name': 'A', 'email': 'a@x.com', 'password': 'pw123456',
        })
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {'success': False, 'error': 'Email already exists'})

    def test_register_missing_fields(self):
        response = self.post('/api/auth/register', {'name': 'A', 'email': 'a@x.com'})
        self.assertEqual(response.status_code, 400)
        self.assertFalse(response.json()['success'])

    def test_register_invalid_role(self):
        response = self.post('/api/auth/register', {
            'name': 'A', 'email': 'a@x.com', 'password': 'pw', 'role': 'OWNER',
        })
        self.assertEqual(response.status_code, 400)
        self.assertFalse(Employee.objects.filter(email='a@x.com').exists())

    def test_login_wrong_password(self):
        make_employee(email='a@x.com')
        response = self.post('/api/auth/login', {'email': 'a@x.com', 'password': 'nope'})
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()['error'], 'Invalid email or password')

    def test_login_unknown_email(self):
        response = self.post('/api/auth/login', {'email': 'ghost@x.com', 'password': 'pw'})
        self.assertEqual(response.status_code, 401)

    def test_login_employee_without_password(self):
        make_employee(email='np@x.com', password=None)
        response = self.post('/api/auth/login', {'email': 'np@x.com', 'password': ''})
        self.assertEqual(response.status_code, 400)
        response = self.post('/api/auth/login', {'email': 'np@x.com', 'password': 'anything'})
        self.assertEqual(response.status_code, 401)


class AuthorizationGateTest(TestCase):

    def setUp(self):
        self.client = Client()
        self.employee = make_employee(name='Gate User')

    def test_missing_token(self):
        response = self.client.get('/api/auth/me')
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {'success': False, 'error': 'Authentication required'})

    def test_garbage_token(self):
        response = self.client.get('/api/auth/me', HTTP_AUTHORIZATION='Bearer garbage')
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()['error'], 'Invalid or expired token')

    def test_expired_token_same_error_as_garbage(self):
        token = issue_token(self.employee.id, lifetime=timedelta(seconds=-5))
        response = self.client.get('/api/auth/me', HTTP_AUTHORIZATION=f'Bearer {token}')
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()['error'], 'Invalid or expired token')

    def test_token_unusable_after_employee_deleted(self):
        headers = auth_header(self.employee)
        self.assertEqual(self.client.get('/api/auth/me', **headers).status_code, 200)

        self.employee.delete()

        response = self.client.get('/api/auth/me', **headers)
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()['error'], 'User not found')

    def test_identity_reflects_current_role(self):
        headers = auth_header(self.employee)
        Employee.objects.filter(id=self.employee.id).update(role=EmployeeRole.ADMIN)
        response = self.client.get('/api/auth/me', **headers)
        self.assertEqual(response.json()['data']['role'], 'ADMIN')
