"""Unit tests for value converters."""

from decimal import Decimal

import pytest

from scenario import LogLevel
from section_settings.converters import ConverterRegistry, default_registry
from section_settings.exceptions import TypeConversionError


@pytest.fixture
def registry() -> ConverterRegistry:
    """Fresh registry with the built-in converters."""
    return ConverterRegistry()


class TestParse:
    """Test raw string parsing."""

    @pytest.mark.parametrize("raw,expected", [("true", True), ("False", False), (" TRUE ", True)])
    def test_bool(self, registry, raw, expected):
        """Test booleans parse case-insensitively."""
        assert registry.parse(raw, bool) is expected

    @pytest.mark.parametrize("raw", ["yes", "1", "", "truthy"])
    def test_bool_rejects_other_words(self, registry, raw):
        """Test only true/false are booleans."""
        with pytest.raises(TypeConversionError):
            registry.parse(raw, bool)

    def test_int(self, registry):
        """Test integers parse after trimming."""
        assert registry.parse(" 42 ", int) == 42
        assert registry.parse("-7", int) == -7

    def test_int_rejects_float_text(self, registry):
        """Test non-integer text fails."""
        with pytest.raises(TypeConversionError) as exc_info:
            registry.parse("4.2", int)

        assert exc_info.value.target_type == "int"
        assert exc_info.value.raw_value == "4.2"

    def test_float(self, registry):
        """Test floats parse."""
        assert registry.parse("2.5", float) == 2.5
        assert registry.parse("1e3", float) == 1000.0

    def test_str_is_identity(self, registry):
        """Test strings are returned untouched."""
        assert registry.parse("  Info ", str) == "  Info "

    def test_decimal(self, registry):
        """Test decimals parse exactly."""
        assert registry.parse("0.10", Decimal) == Decimal("0.10")

    def test_decimal_rejects_garbage(self, registry):
        """Test invalid decimals fail."""
        with pytest.raises(TypeConversionError):
            registry.parse("ten", Decimal)

    def test_enum_by_name(self, registry):
        """Test enums parse by member name."""
        assert registry.parse("Debug", LogLevel) is LogLevel.Debug

    @pytest.mark.parametrize("raw", ["debug", "DEBUG", "10", "Verbose"])
    def test_enum_name_is_case_sensitive(self, registry, raw):
        """Test enum names must match exactly."""
        with pytest.raises(TypeConversionError):
            registry.parse(raw, LogLevel)

    def test_unregistered_type(self, registry):
        """Test unknown types fail with TypeConversionError."""
        with pytest.raises(TypeConversionError) as exc_info:
            registry.parse("x", bytes)

        assert "No converter" in str(exc_info.value)

    def test_conversion_error_is_value_error(self, registry):
        """Test conversion errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            registry.parse("abc", int)


class TestSerialize:
    """Test value serialization."""

    def test_bool(self, registry):
        """Test booleans serialize to lowercase words."""
        assert registry.serialize(True) == "true"
        assert registry.serialize(False) == "false"

    def test_int(self, registry):
        """Test integers serialize in base 10."""
        assert registry.serialize(-12) == "-12"

    def test_bool_is_not_an_int(self, registry):
        """Test booleans cannot be written as integers."""
        with pytest.raises(TypeConversionError):
            registry.serialize(True, int)

    def test_float_round_trips(self, registry):
        """Test floats serialize losslessly."""
        value = 0.1 + 0.2
        assert registry.parse(registry.serialize(value), float) == value

    def test_int_as_float(self, registry):
        """Test integers may be written as floats."""
        assert registry.serialize(3, float) == "3.0"

    def test_enum(self, registry):
        """Test enum members serialize to their name."""
        assert registry.serialize(LogLevel.Warn) == "Warn"

    def test_str_as_int_fails(self, registry):
        """Test mismatched explicit types fail."""
        with pytest.raises(TypeConversionError):
            registry.serialize("5", int)


class TestRegistry:
    """Test custom registrations."""

    def test_register_custom_type(self, registry):
        """Test custom converters are used for parse and serialize."""
        registry.register(complex, complex, str)

        assert registry.supports(complex)
        assert registry.parse("1+2j", complex) == complex(1, 2)
        assert registry.serialize(complex(1, 2)) == "(1+2j)"

    def test_custom_registration_is_local(self, registry):
        """Test registrations do not leak into the default registry."""
        registry.register(complex, complex, str)

        assert not default_registry.supports(complex)

    def test_supports_enums_without_registration(self, registry):
        """Test every Enum subclass is supported."""
        assert registry.supports(LogLevel)
        assert not registry.supports(list)

    def test_empty_registry(self):
        """Test registries can start without built-ins."""
        registry = ConverterRegistry(include_defaults=False)

        assert not registry.supports(int)
        assert registry.supports(LogLevel)
