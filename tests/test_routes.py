"""Tests for the HTTP API."""

import pytest

from amount_words.app import create_app
from amount_words.config import AppConfig, ConversionConfig


class TestConvertPost:
    """Tests for POST /api/convert."""

    def test_default_options(self, client):
        """A plain amount converts with default options."""
        response = client.post('/api/convert', json={'input': '123.45'})

        assert response.status_code == 200
        data = response.get_json()
        assert data['result'] == "ONE HUNDRED TWENTY THREE DOLLARS AND FORTY FIVE CENTS"
        assert data['original_value'] == '123.45'
        assert data['processing_time_ms'] >= 0

    def test_with_options(self, client):
        """Options in the body change the phrase."""
        response = client.post('/api/convert', json={
            'input': '123.45',
            'options': {
                'currency_name': 'POUNDS',
                'sub_currency_name': 'PENCE',
                'use_and_connector': False,
                'style': 'TITLE',
            },
        })

        assert response.status_code == 200
        assert response.get_json()['result'] == (
            "One Hundred Twenty Three Pounds Forty Five Pence"
        )

    def test_unknown_style_falls_back(self, client):
        """An unrecognized style converts in upper case."""
        response = client.post('/api/convert', json={
            'input': '1', 'options': {'style': 'Fancy'}
        })

        assert response.status_code == 200
        assert response.get_json()['result'] == "ONE DOLLARS AND ZERO CENTS"

    @pytest.mark.parametrize("text,message", [
        ('abc', 'Invalid number format'),
        ('', 'Input cannot be empty'),
        ('1.234', 'Currency values cannot have more than 2 decimal places'),
        ('-5', 'Negative numbers are not currently supported'),
        ('1000000', 'Value must be between 0 and 999999.99'),
    ])
    def test_invalid_input(self, client, text, message):
        """Validation failures return 400 with the reason."""
        response = client.post('/api/convert', json={'input': text})

        assert response.status_code == 400
        data = response.get_json()
        assert data['error'] == message
        assert data['code'] == 'VALIDATION_ERROR'
        assert data['request_id'].startswith('req_')

    def test_missing_input(self, client):
        """A body without input is treated as empty input."""
        response = client.post('/api/convert', json={})

        assert response.status_code == 400
        assert response.get_json()['error'] == 'Input cannot be empty'

    def test_non_string_input(self, client):
        """Input must be sent as a string."""
        response = client.post('/api/convert', json={'input': 123.45})

        assert response.status_code == 400
        data = response.get_json()
        assert data['error'] == 'Input must be a string'
        assert data['details'] == {'field': 'input'}

    def test_malformed_options(self, client):
        """Wrongly typed options are a validation error."""
        response = client.post('/api/convert', json={
            'input': '1', 'options': {'currency_name': 7}
        })

        assert response.status_code == 400
        data = response.get_json()
        assert data['code'] == 'VALIDATION_ERROR'
        assert data['error'] == "'currency_name' must be a non-empty string"

    @pytest.mark.parametrize("body", [['123.45'], [], 0, "", False])
    def test_body_must_be_object(self, client, body):
        """JSON bodies other than objects are rejected, falsy ones included."""
        response = client.post('/api/convert', json=body)

        assert response.status_code == 400
        assert response.get_json()['error'] == 'Request body must be a JSON object'

    def test_response_headers(self, client):
        """Tracking and security headers are set."""
        response = client.post('/api/convert', json={'input': '1'})

        assert response.headers['X-Request-ID'].startswith('req_')
        assert response.headers['X-Content-Type-Options'] == 'nosniff'
        assert response.headers['X-Frame-Options'] == 'DENY'
        assert float(response.headers['X-Processing-Time-Ms']) >= 0


class TestConvertGet:
    """Tests for GET /api/convert."""

    def test_query_parameters(self, client):
        """Query parameters are converted like a JSON body."""
        response = client.get('/api/convert?input=1000&style=sentence')

        assert response.status_code == 200
        assert response.get_json()['result'] == "One thousand dollars and zero cents"

    def test_connector_flag(self, client):
        """use_and_connector accepts false."""
        response = client.get('/api/convert?input=5&use_and_connector=false')

        assert response.get_json()['result'] == "FIVE DOLLARS ZERO CENTS"

    def test_bad_connector_flag(self, client):
        """Unparseable flags are a validation error."""
        response = client.get('/api/convert?input=5&use_and_connector=perhaps')

        assert response.status_code == 400
        assert response.get_json()['code'] == 'VALIDATION_ERROR'

    def test_missing_input(self, client):
        """Missing query input is rejected."""
        response = client.get('/api/convert')

        assert response.status_code == 400
        assert response.get_json()['error'] == 'Input cannot be empty'


class TestConfiguredDefaults:
    """Defaults from configuration apply to requests without options."""

    def test_configured_currency_and_style(self):
        """Configured names and style are used."""
        config = AppConfig(
            env='testing',
            conversion=ConversionConfig(
                currency_name='EUROS',
                sub_currency_name='CENTS',
                use_and_connector=True,
                style='TITLE',
            ),
        )
        client = create_app(config).test_client()

        response = client.post('/api/convert', json={'input': '2'})

        assert response.get_json()['result'] == "Two Euros And Zero Cents"

    def test_request_options_override_defaults(self):
        """Request options override configured defaults field by field."""
        config = AppConfig(
            env='testing',
            conversion=ConversionConfig(
                currency_name='EUROS',
                sub_currency_name='CENTS',
                use_and_connector=True,
                style='TITLE',
            ),
        )
        client = create_app(config).test_client()

        response = client.post('/api/convert', json={
            'input': '2', 'options': {'style': 'UPPER'}
        })

        assert response.get_json()['result'] == "TWO EUROS AND ZERO CENTS"


class TestStyles:
    """Tests for GET /api/styles."""

    def test_lists_styles_and_defaults(self, client):
        """Styles, defaults and limits are reported."""
        response = client.get('/api/styles')

        assert response.status_code == 200
        data = response.get_json()
        assert data['styles'] == ['UPPER', 'TITLE', 'SENTENCE']
        assert data['defaults'] == {
            'currency_name': 'DOLLARS',
            'sub_currency_name': 'CENTS',
            'use_and_connector': True,
            'style': 'UPPER',
        }
        assert data['limits']['max_value'] == '999999.99'
        assert data['limits']['max_decimal_places'] == 2


class TestHealth:
    """Tests for health and probe endpoints."""

    def test_health(self, client):
        """The converter self-check passes."""
        response = client.get('/health')

        assert response.status_code == 200
        data = response.get_json()
        assert data['status'] == 'healthy'
        assert data['checks']['converter']['healthy'] is True

    def test_ready(self, client):
        """Readiness probe answers."""
        assert client.get('/ready').get_json() == {'ready': True}

    def test_live(self, client):
        """Liveness probe answers."""
        assert client.get('/live').get_json() == {'alive': True}


class TestErrors:
    """Tests for global error handling."""

    def test_not_found(self, client):
        """Unknown paths return a NOT_FOUND payload."""
        response = client.get('/api/nothing-here')

        assert response.status_code == 404
        assert response.get_json()['code'] == 'NOT_FOUND'

    def test_method_not_allowed(self, client):
        """Unsupported methods return METHOD_NOT_ALLOWED."""
        response = client.delete('/api/convert')

        assert response.status_code == 405
        assert response.get_json()['code'] == 'METHOD_NOT_ALLOWED'

    def test_malformed_json(self, client):
        """A body that is not JSON is a validation error."""
        response = client.post(
            '/api/convert', data='{not json', content_type='application/json'
        )

        assert response.status_code == 400
        assert response.get_json()['code'] == 'VALIDATION_ERROR'
