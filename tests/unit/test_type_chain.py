"""Unit tests for type chain helpers."""

from collections import OrderedDict

import pytest

from scenario import Base, Buggy, MyClass
from section_settings.exceptions import InvalidNameError
from section_settings.type_chain import normalize_type_chain, type_chain_for, validate_name


class Intermediate(Buggy):
    pass


class Derived(Intermediate):
    pass


class LocalDict(OrderedDict):
    """Derives from a class outside this package."""


class TestTypeChainFor:
    """Test type_chain_for()."""

    def test_none(self):
        """Test None has no chain."""
        assert type_chain_for(None) == ()

    def test_root_class(self):
        """Test a class without package ancestors is its own chain."""
        assert type_chain_for(Base) == ("Base",)
        assert type_chain_for(MyClass) == ("MyClass",)

    def test_two_levels(self):
        """Test a subclass lists its base first."""
        assert type_chain_for(Buggy) == ("Base", "Buggy")

    def test_stops_at_package_boundary(self):
        """Test ancestors from another package are left out."""
        # Intermediate/Derived live in this test module, Buggy/Base in scenario
        assert type_chain_for(Derived) == ("Intermediate", "Derived")

    def test_stops_at_stdlib_base(self):
        """Test stdlib ancestors are left out."""
        assert type_chain_for(LocalDict) == ("LocalDict",)

    def test_rejects_instances(self):
        """Test non-class arguments are rejected."""
        with pytest.raises(TypeError):
            type_chain_for(Base())


class TestNormalize:
    """Test normalize_type_chain() and validate_name()."""

    def test_sequence(self):
        """Test name sequences become tuples."""
        assert normalize_type_chain(["Base", "Buggy"]) == ("Base", "Buggy")

    def test_class(self):
        """Test classes are walked."""
        assert normalize_type_chain(Buggy) == ("Base", "Buggy")

    def test_none(self):
        """Test None is the empty chain."""
        assert normalize_type_chain(None) == ()

    @pytest.mark.parametrize("name", ["", "A.B", None, 3])
    def test_invalid_names(self, name):
        """Test invalid names are rejected."""
        with pytest.raises(InvalidNameError):
            validate_name(name)

    def test_invalid_name_is_value_error(self):
        """Test InvalidNameError can be caught as ValueError."""
        with pytest.raises(ValueError):
            normalize_type_chain(["ok", "not.ok"])
