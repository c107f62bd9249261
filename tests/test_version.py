"""
Tests for version metadata.
"""

import pytest

import colrcv
from colrcv.core.version import VERSION, Version, parse_version


class TestVersionParsing:
    """Tests for version string parsing."""

    def test_parse_simple_version(self):
        assert parse_version("0.1.0") == Version(0, 1, 0)
        assert parse_version("10.20.30") == Version(10, 20, 30)

    def test_parse_version_with_v_prefix(self):
        assert parse_version("v1.2.3") == Version(1, 2, 3)

    def test_parse_version_with_suffix(self):
        assert parse_version("1.2.3-rc1") == Version(1, 2, 3)
        assert parse_version("v2.0.0-alpha") == Version(2, 0, 0)

    @pytest.mark.parametrize("text", ["", "1", "1.2", "v", "beta"])
    def test_parse_incomplete_version(self, text):
        with pytest.raises(ValueError):
            parse_version(text)


class TestVersion:
    """Tests for the Version record."""

    def test_string_form(self):
        assert Version(1, 4, 2).string == "v1.4.2"

    def test_ordering_by_tuple(self):
        assert Version(0, 2, 0).as_tuple() > Version(0, 1, 9).as_tuple()

    def test_package_version(self):
        assert VERSION == parse_version(colrcv.__version__)
        assert VERSION.string == f"v{colrcv.__version__}"

    def test_version_defined_in_core(self):
        from colrcv.core import version

        assert colrcv.__version__ == version.__version__
