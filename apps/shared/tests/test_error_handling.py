from unittest.mock import Mock

from django.db import IntegrityError
from django.test import SimpleTestCase

from apps.shared.decorators.database import handle_db_errors
from apps.shared.exceptions import BusinessRuleViolation
from apps.shared.exceptions import ResourceNotFoundError
from apps.shared.exceptions import ServiceUnavailableError
from apps.shared.exceptions import ValidationError
from apps.shared.exceptions.api_handler import custom_exception_handler
from apps.shared.utils.best_effort import attempt


class SampleDAL:
    @handle_db_errors(operation_type='create', model_name='Sample')
    def create(self, error):
        raise error


class HandleDbErrorsTest(SimpleTestCase):
    def test_integrity_error(self):
        with self.assertRaises(ValidationError) as context:
            SampleDAL().create(IntegrityError('duplicate key'))

        self.assertEqual(context.exception.error_code, 'create_integrity_error')

    def test_unexpected_error(self):
        with self.assertRaises(ServiceUnavailableError):
            SampleDAL().create(RuntimeError('connection reset'))

    def test_business_errors_pass_through(self):
        error = BusinessRuleViolation('Organizer not found.')

        with self.assertRaises(BusinessRuleViolation) as context:
            SampleDAL().create(error)

        self.assertIs(context.exception, error)


class ExceptionHandlerTest(SimpleTestCase):
    def _handle(self, exc):
        return custom_exception_handler(exc, {'request': None, 'view': None})

    def test_failed_precondition(self):
        response = self._handle(BusinessRuleViolation('Date is a mandatory parameter.', error_code='date_required'))

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data['kind'], 'failed-precondition')
        self.assertEqual(response.data['error_code'], 'date_required')
        self.assertEqual(response.data['message'], 'Date is a mandatory parameter.')

    def test_not_found(self):
        response = self._handle(ResourceNotFoundError('Event not found'))

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data['kind'], 'not-found')

    def test_unavailable(self):
        response = self._handle(ServiceUnavailableError('Short link generation failed'))

        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.data['kind'], 'unavailable')

    def test_unhandled(self):
        response = self._handle(KeyError('boom'))

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.data['kind'], 'internal')


class AttemptTest(SimpleTestCase):
    def test_success(self):
        func = Mock()

        self.assertTrue(attempt('sample', func, 1, flag=True))
        func.assert_called_once_with(1, flag=True)

    def test_failure_is_logged_not_raised(self):
        with self.assertLogs('apps.shared.utils.best_effort', level='WARNING') as logs:
            self.assertFalse(attempt('sample', Mock(side_effect=ValueError('bad'))))

        self.assertIn('Non-critical: sample failed: bad', logs.output[0])
