"""Unit tests for npm package-name validation (create_app.validator).

Tests cover:
- Accepted names (plain, scoped, digits, dots)
- Each error rule
- Each warning rule
- check_app_name raising InvalidNameError, including reserved names
"""

from __future__ import annotations

import pytest

from create_app.errors import InvalidNameError
from create_app.validator import (
    MAX_NAME_LENGTH,
    check_app_name,
    validate_package_name,
)

pytestmark = pytest.mark.unit


class TestAcceptedNames:
    @pytest.mark.parametrize(
        "name",
        ["my-app", "app", "some.package", "app2", "under_score", "@scope/pkg", "a" * 214],
    )
    def test_valid_for_new_packages(self, name: str):
        result = validate_package_name(name)
        assert result.errors == []
        assert result.warnings == []
        assert result.valid_for_new_packages
        assert result.valid_for_old_packages


class TestErrors:
    def test_empty_name(self):
        result = validate_package_name("")
        assert "name length must be greater than zero" in result.errors
        assert not result.valid_for_old_packages

    def test_leading_period(self):
        assert "name cannot start with a period" in validate_package_name(".app").errors

    def test_leading_underscore(self):
        assert "name cannot start with an underscore" in validate_package_name("_app").errors

    def test_surrounding_spaces(self):
        result = validate_package_name(" app ")
        assert "name cannot contain leading or trailing spaces" in result.errors

    @pytest.mark.parametrize("name", ["node_modules", "favicon.ico", "Node_Modules"])
    def test_blacklisted(self, name: str):
        assert f"{name.lower()} is a blacklisted name" in validate_package_name(name).errors

    @pytest.mark.parametrize("name", ["my app", "app/sub", "café", "a%20b", "@/pkg"])
    def test_url_unfriendly(self, name: str):
        result = validate_package_name(name)
        assert "name can only contain URL-friendly characters" in result.errors

    def test_scoped_name_with_bad_part(self):
        result = validate_package_name("@scope/my pkg")
        assert "name can only contain URL-friendly characters" in result.errors


class TestWarnings:
    def test_core_module(self):
        result = validate_package_name("http")
        assert result.errors == []
        assert "http is a core module name" in result.warnings
        assert result.valid_for_old_packages
        assert not result.valid_for_new_packages

    def test_too_long(self):
        result = validate_package_name("a" * (MAX_NAME_LENGTH + 1))
        assert "name can no longer contain more than 214 characters" in result.warnings

    def test_capital_letters(self):
        result = validate_package_name("MyApp")
        assert result.warnings == ["name can no longer contain capital letters"]

    @pytest.mark.parametrize("name", ["app!", "it's", "(app)", "app~", "app*"])
    def test_special_characters(self, name: str):
        warnings = validate_package_name(name).warnings
        assert any("special characters" in w for w in warnings)

    def test_special_characters_only_checked_in_last_segment(self):
        result = validate_package_name("@sc!ope/pkg")
        assert not any("special characters" in w for w in result.warnings)

    def test_errors_and_warnings_combined(self):
        result = validate_package_name("_My App")
        assert "name cannot start with an underscore" in result.errors
        assert "name can only contain URL-friendly characters" in result.errors
        assert "name can no longer contain capital letters" in result.warnings


class TestCheckAppName:
    def test_valid_name_returns_result(self):
        result = check_app_name("my-app")
        assert result.valid_for_new_packages

    def test_invalid_name_raises_with_violations(self):
        with pytest.raises(InvalidNameError) as exc_info:
            check_app_name("MyApp")
        err = exc_info.value
        assert err.name == "MyApp"
        assert err.errors == []
        assert err.warnings == ["name can no longer contain capital letters"]
        assert err.violations == err.errors + err.warnings

    def test_warning_only_name_is_rejected(self):
        with pytest.raises(InvalidNameError):
            check_app_name("fs")

    def test_reserved_dependency_name_rejected(self):
        with pytest.raises(InvalidNameError) as exc_info:
            check_app_name("react", reserved={"react", "react-dom"})
        message = exc_info.value.errors[0]
        assert "react, react-dom" in message

    def test_unreserved_name_passes(self):
        check_app_name("my-app", reserved={"react"})


class TestMessagesUseListedName:
    def test_blacklisted_message_is_lowercase(self):
        assert validate_package_name("Node_Modules").errors[0] == "node_modules is a blacklisted name"

    def test_core_module_message_is_lowercase(self):
        assert "http is a core module name" in validate_package_name("HTTP").warnings
