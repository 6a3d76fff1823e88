from types import SimpleNamespace

from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase

from apps.core.exceptions import NotEnoughPermission
from apps.core.permissions import PermissionRegistry


class TestPermissionRegistry(SimpleTestCase):
    """Tests for the named permission registry."""

    def setUp(self):
        self.registry = PermissionRegistry()
        self.calls = []

        @self.registry.register('author_must_be_named_regis')
        def is_regis(author, context):
            self.calls.append('is_regis')
            return author.name == 'Regis'

        self.registry.register('always_refused', lambda author, context: False)

    def test_register(self):
        """Test decorator and direct registration."""
        self.assertEqual(self.registry.names(), ['always_refused', 'author_must_be_named_regis'])
        self.assertTrue(self.registry.is_registered('always_refused'))

    def test_unregister(self):
        """Test a check can be removed."""
        self.registry.unregister('always_refused')

        self.assertFalse(self.registry.is_registered('always_refused'))

    def test_check(self):
        """Test a single check."""
        self.assertTrue(self.registry.check('author_must_be_named_regis', SimpleNamespace(name='Regis'), None))
        self.assertFalse(self.registry.check('author_must_be_named_regis', SimpleNamespace(name='Ross'), None))

    def test_unknown_check(self):
        """Test unknown names are configuration errors."""
        with self.assertRaises(ImproperlyConfigured):
            self.registry.check('nope', None, None)

    def test_enforce_passes(self):
        """Test enforce returns quietly when every check holds."""
        self.registry.enforce(['author_must_be_named_regis'], SimpleNamespace(name='Regis', id=1), None)

    def test_enforce_stops_at_first_failure(self):
        """Test the first failing check is reported and later ones skipped."""
        with self.assertRaises(NotEnoughPermission) as ctx:
            self.registry.enforce(
                ['always_refused', 'author_must_be_named_regis'],
                SimpleNamespace(name='Regis', id=1),
                None
            )

        self.assertEqual(ctx.exception.check, 'always_refused')
        self.assertEqual(self.calls, [])

    def test_enforce_nothing(self):
        """Test an empty permission list always passes."""
        self.registry.enforce([], None, None)
