import pytest

from event_ticketing.platform.constant.route_constant import AUTH_ME, AUTH_SIGNUP
from tests.shared.utils import assert_response_status, auth_headers, create_user, login_user
from tests.util_constant import (
    DEFAULT_PASSWORD,
    TEST_CUSTOMER_EMAIL,
    TEST_CUSTOMER_NAME,
    TEST_ORGANIZER_EMAIL,
    TEST_ORGANIZER_NAME,
    WRONG_PASSWORD,
)


@pytest.mark.integration
class TestSignUp:
    def test_signup_returns_token_and_user(self, client):
        response = client.post(
            AUTH_SIGNUP,
            json={
                'name': TEST_ORGANIZER_NAME,
                'email': TEST_ORGANIZER_EMAIL,
                'password': DEFAULT_PASSWORD,
                'role': 'organizer',
            },
        )

        assert_response_status(response, 201)
        body = response.json()
        assert body['message'] == 'User registered successfully'
        assert body['token']
        assert body['user']['email'] == TEST_ORGANIZER_EMAIL
        assert body['user']['role'] == 'organizer'
        assert 'password' not in body['user']
        assert 'hashedPassword' not in body['user']

    def test_role_defaults_to_customer(self, client):
        response = client.post(
            AUTH_SIGNUP,
            json={
                'name': TEST_CUSTOMER_NAME,
                'email': TEST_CUSTOMER_EMAIL,
                'password': DEFAULT_PASSWORD,
            },
        )

        assert_response_status(response, 201)
        assert response.json()['user']['role'] == 'customer'

    def test_duplicate_email_conflicts(self, client, customer):
        response = client.post(
            AUTH_SIGNUP,
            json={
                'name': 'Someone Else',
                'email': TEST_CUSTOMER_EMAIL,
                'password': DEFAULT_PASSWORD,
            },
        )

        assert_response_status(response, 409)

    def test_short_password_is_rejected(self, client):
        response = client.post(
            AUTH_SIGNUP,
            json={'name': 'Short', 'email': 'short@test.com', 'password': '123'},
        )

        assert_response_status(response, 400)
        assert response.json()['field'] == 'password'

    def test_unknown_role_is_rejected(self, client):
        response = client.post(
            AUTH_SIGNUP,
            json={
                'name': 'Admin',
                'email': 'admin@test.com',
                'password': DEFAULT_PASSWORD,
                'role': 'admin',
            },
        )

        assert_response_status(response, 400)


@pytest.mark.integration
class TestLogin:
    def test_login_with_valid_credentials(self, client, customer):
        response = login_user(client, TEST_CUSTOMER_EMAIL)

        assert_response_status(response, 200)
        body = response.json()
        assert body['message'] == 'Login successful'
        assert body['user']['id'] == customer['user']['id']

    def test_login_with_wrong_password(self, client, customer):
        response = login_user(client, TEST_CUSTOMER_EMAIL, WRONG_PASSWORD)

        assert_response_status(response, 401)
        assert response.json()['detail'] == 'Invalid email or password'

    def test_login_with_unknown_email(self, client):
        response = login_user(client, 'nobody@test.com')

        assert_response_status(response, 401)


@pytest.mark.integration
class TestMe:
    def test_me_returns_current_account(self, client, organizer):
        response = client.get(AUTH_ME, headers=organizer['headers'])

        assert_response_status(response, 200)
        assert response.json()['email'] == TEST_ORGANIZER_EMAIL

    def test_me_without_token(self, client):
        response = client.get(AUTH_ME)

        assert_response_status(response, 401)

    def test_me_with_garbage_token(self, client):
        response = client.get(AUTH_ME, headers=auth_headers('not-a-jwt'))

        assert_response_status(response, 401)
        assert response.json()['detail'] == 'Invalid token'

    def test_token_from_login_works(self, client):
        create_user(client, 'login@test.com', 'Login User', 'customer')
        token = login_user(client, 'login@test.com').json()['token']

        response = client.get(AUTH_ME, headers=auth_headers(token))

        assert_response_status(response, 200)
