"""
Tests for declarative payload validation.

Covers:
- Presence rules (required, nullable)
- Type rules (integer, numeric, string, boolean)
- Bounds and choices (max, in)
- Remote existence (Exists, exists: tag)
- Rule set errors
"""

from django.core.exceptions import ImproperlyConfigured, ValidationError
from django.test import TestCase

from apps.accounts.models import Account, AddressType
from apps.core.validation import (
    Exists,
    is_blank,
    model_for_table,
    validate_field,
    validate_payload,
)


class TestPresenceRules(TestCase):
    """Tests for required and nullable fields."""

    def test_required_field_missing(self):
        """Test missing, None and empty values fail a required field."""
        for data in [{}, {'name': None}, {'name': ''}]:
            self.assertEqual(
                validate_field(data, 'name', ['required', 'string']),
                ["This field is required."]
            )

    def test_nullable_field_missing(self):
        """Test absent optional fields skip their other constraints."""
        self.assertEqual(validate_field({}, 'age', ['nullable', 'integer']), [])
        self.assertEqual(validate_field({'age': None}, 'age', ['nullable', 'integer']), [])
        self.assertEqual(validate_field({'age': ''}, 'age', ['nullable', 'integer']), [])

    def test_is_blank(self):
        """Test None and empty strings are the only absent values."""
        for value in [None, '']:
            self.assertTrue(is_blank(value), value)
        for value in [0, False, ' ', '0', [], {}]:
            self.assertFalse(is_blank(value), value)

    def test_nullable_field_present_is_checked(self):
        """Test optional fields are validated when given."""
        self.assertEqual(
            validate_field({'age': 'old'}, 'age', ['nullable', 'integer']),
            ["Enter a valid integer."]
        )


class TestTypeRules(TestCase):
    """Tests for type constraints."""

    def test_integer(self):
        """Test integer accepts ints and digit strings only."""
        self.assertEqual(validate_field({'v': 12}, 'v', ['integer']), [])
        self.assertEqual(validate_field({'v': '-12'}, 'v', ['integer']), [])
        self.assertEqual(validate_field({'v': '1.5'}, 'v', ['integer']), ["Enter a valid integer."])
        self.assertEqual(validate_field({'v': True}, 'v', ['integer']), ["Enter a valid integer."])

    def test_numeric(self):
        """Test numeric accepts ints, floats and decimal strings."""
        self.assertEqual(validate_field({'v': 48.86}, 'v', ['numeric']), [])
        self.assertEqual(validate_field({'v': '-2.33'}, 'v', ['numeric']), [])
        self.assertEqual(validate_field({'v': 'north'}, 'v', ['numeric']), ["Enter a number."])

    def test_numeric_forms(self):
        """Test signed, leading-dot and exponent forms are numbers, non-finite values are not."""
        for value in ['+1', '.5', '1e5', '-2.5E-3', 10 ** 400]:
            self.assertEqual(validate_field({'v': value}, 'v', ['numeric']), [], value)
        for value in ['nan', 'inf', float('nan'), float('-inf'), ' 1', '1_000', '1e']:
            self.assertEqual(validate_field({'v': value}, 'v', ['numeric']), ["Enter a number."], value)

    def test_string(self):
        """Test string rejects other types."""
        self.assertEqual(validate_field({'v': 'Ross'}, 'v', ['string']), [])
        self.assertEqual(validate_field({'v': 12}, 'v', ['string']), ["Enter a valid string."])

    def test_boolean(self):
        """Test boolean accepts true/false and 0/1 forms."""
        for value in [True, False, 0, 1, '0', '1']:
            self.assertEqual(validate_field({'v': value}, 'v', ['boolean']), [], value)
        self.assertEqual(
            validate_field({'v': 'yes'}, 'v', ['boolean']),
            ["Must be either true or false."]
        )


class TestBoundsAndChoices(TestCase):
    """Tests for max and in constraints."""

    def test_max_on_strings(self):
        """Test max limits string length."""
        self.assertEqual(validate_field({'v': 'a' * 255}, 'v', ['string', 'max:255']), [])
        self.assertEqual(
            validate_field({'v': 'a' * 256}, 'v', ['string', 'max:255']),
            ["Ensure this value has at most 255 characters."]
        )

    def test_max_on_numbers(self):
        """Test max limits numeric values."""
        self.assertEqual(
            validate_field({'v': 11}, 'v', ['integer', 'max:10']),
            ["Ensure this value is less than or equal to 10."]
        )

    def test_in(self):
        """Test in restricts values to a list of choices."""
        self.assertEqual(validate_field({'v': 200}, 'v', ['in:100,200,300']), [])
        self.assertEqual(validate_field({'v': '300'}, 'v', ['in:100,200,300']), [])
        self.assertEqual(validate_field({'v': 150}, 'v', ['in:100,200,300']), ["Select a valid choice."])

    def test_first_error_wins(self):
        """Test a field reports only its first failing constraint."""
        self.assertEqual(
            validate_field({'v': 'abc'}, 'v', ['required', 'integer', 'max:1']),
            ["Enter a valid integer."]
        )


class TestExistsRule(TestCase):
    """Tests for remote-existence constraints."""

    def setUp(self):
        self.account = Account.objects.create()

    def test_exists_descriptor(self):
        """Test Exists checks the id column of the table."""
        self.assertEqual(validate_field({'v': self.account.id}, 'v', [Exists('accounts')]), [])
        self.assertEqual(
            validate_field({'v': self.account.id + 1}, 'v', [Exists('accounts')]),
            ["The selected id is invalid."]
        )

    def test_exists_tag_with_column(self):
        """Test the exists: tag with an explicit column."""
        AddressType.objects.create(account=self.account, name='home')

        self.assertEqual(validate_field({'v': 'home'}, 'v', ['exists:address_types,name']), [])
        self.assertEqual(
            validate_field({'v': 'cabin'}, 'v', ['exists:address_types,name']),
            ["The selected name is invalid."]
        )

    def test_exists_parse(self):
        """Test parsing of the exists: tag argument."""
        self.assertEqual(Exists.parse('users'), Exists('users', 'id'))
        self.assertEqual(Exists.parse('users, email'), Exists('users', 'email'))
        with self.assertRaises(ImproperlyConfigured):
            Exists.parse('a,b,c')

    def test_model_for_table(self):
        """Test tables resolve to installed models."""
        self.assertIs(model_for_table('accounts'), Account)
        with self.assertRaises(ImproperlyConfigured):
            model_for_table('nonexistent')


class TestValidatePayload(TestCase):
    """Tests for whole-payload validation."""

    rules = {
        'name': ['required', 'string', 'max:5'],
        'age': ['nullable', 'integer'],
        'level': ['required', 'in:1,2'],
    }

    def test_valid_payload_is_returned_unchanged(self):
        """Test a valid payload comes back as-is, extra keys included."""
        data = {'name': 'Ross', 'level': 1, 'extra': 'kept'}

        self.assertIs(validate_payload(data, self.rules), data)

    def test_all_failures_are_reported(self):
        """Test every violated field is in the error."""
        with self.assertRaises(ValidationError) as ctx:
            validate_payload({'name': 'Rachel', 'age': 'x'}, self.rules)

        self.assertEqual(ctx.exception.message_dict, {
            'name': ["Ensure this value has at most 5 characters."],
            'age': ["Enter a valid integer."],
            'level': ["This field is required."],
        })

    def test_non_mapping_payload(self):
        """Test payloads must be dicts."""
        with self.assertRaises(ValidationError):
            validate_payload(['name'], self.rules)

    def test_unknown_rule(self):
        """Test a typo in a rule set is a configuration error."""
        with self.assertRaises(ImproperlyConfigured):
            validate_payload({'name': 'Ross'}, {'name': ['strnig']})
