"""Unit tests for descriptor variants and default policy injection.

Tests cover:
- policy_shape / handler_shape classification
- PolicyOrMiddleware adapter (strings, callables, mappings, instances)
- RouteDescriptor.with_default_policies ordering and no-op cases
"""

import pytest
from pydantic import TypeAdapter, ValidationError

from routekit.domain.value_objects import (
    ConfiguredReference,
    InlineFunction,
    NamedReference,
    PolicyOrMiddleware,
    RouteDescriptor,
)
from routekit.domain.value_objects.policy_descriptor import (
    CONFIGURED_REFERENCE_TAG,
    INLINE_FUNCTION_TAG,
    NAMED_REFERENCE_TAG,
    policy_shape,
)
from routekit.domain.value_objects.route_handler import (
    HANDLER_CHAIN_TAG,
    HANDLER_FUNCTION_TAG,
    HANDLER_REFERENCE_TAG,
    handler_shape,
)

policy_adapter = TypeAdapter(PolicyOrMiddleware)


def check_owner() -> bool:
    return True


def route(**config):
    raw = {"method": "GET", "path": "/articles", "handler": "article.find"}
    if config:
        raw["config"] = config
    return RouteDescriptor.model_validate(raw)


@pytest.mark.unit
class TestShapeClassification:
    """Raw values map to exactly one variant tag."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("is-admin", NAMED_REFERENCE_TAG),
            (check_owner, INLINE_FUNCTION_TAG),
            ({"name": "rate-limit"}, CONFIGURED_REFERENCE_TAG),
            (NamedReference(name="x"), NAMED_REFERENCE_TAG),
            (42, None),
            (None, None),
            (["is-admin"], None),
        ],
    )
    def test_policy_shape(self, value, expected):
        """Test policy descriptors are classified by runtime shape."""
        assert policy_shape(value) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("health.check", HANDLER_REFERENCE_TAG),
            (["a", "b"], HANDLER_CHAIN_TAG),
            ((), HANDLER_CHAIN_TAG),
            (check_owner, HANDLER_FUNCTION_TAG),
            ({}, None),
            (3.5, None),
        ],
    )
    def test_handler_shape(self, value, expected):
        """Test handlers are classified by runtime shape."""
        assert handler_shape(value) == expected


@pytest.mark.unit
class TestPolicyOrMiddlewareAdapter:
    """Validation of a single policy/middleware descriptor."""

    def test_string_becomes_named_reference(self):
        """Test strings resolve by name later."""
        assert policy_adapter.validate_python("is-admin") == NamedReference(name="is-admin")

    def test_callable_becomes_inline_function(self):
        """Test callables are used as-is."""
        descriptor = policy_adapter.validate_python(check_owner)

        assert isinstance(descriptor, InlineFunction)
        assert descriptor.function is check_owner

    def test_mapping_becomes_configured_reference(self):
        """Test {name, options} mappings keep their options."""
        descriptor = policy_adapter.validate_python(
            {"name": "rate-limit", "options": {"max": 5}, "ignored": True}
        )

        assert descriptor == ConfiguredReference(name="rate-limit", options={"max": 5})

    def test_options_are_optional(self):
        """Test options default to None."""
        descriptor = policy_adapter.validate_python({"name": "cache"})

        assert descriptor.options is None

    def test_classified_instance_passes_through(self):
        """Test already classified descriptors validate unchanged."""
        reference = NamedReference(name="is-admin")

        assert policy_adapter.validate_python(reference) == reference

    def test_unsupported_shape_raises(self):
        """Test numbers are not policy descriptors."""
        with pytest.raises(ValidationError) as exc_info:
            policy_adapter.validate_python(42)

        assert exc_info.value.errors()[0]["type"] == "policy_descriptor"

    def test_empty_name_raises(self):
        """Test names cannot be empty."""
        with pytest.raises(ValidationError):
            policy_adapter.validate_python("")

    def test_descriptors_are_frozen(self):
        """Test variants are immutable."""
        reference = NamedReference(name="is-admin")

        with pytest.raises(ValidationError):
            reference.name = "other"


@pytest.mark.unit
class TestDefaultPolicyInjection:
    """Default policies are prepended only to routes declaring policies."""

    def test_defaults_are_prepended_in_order(self):
        """Test [P] + [Q] gives [P, Q]."""
        defaults = (NamedReference(name="P"),)

        augmented = route(policies=["Q"]).with_default_policies(defaults)

        assert augmented.policies == (NamedReference(name="P"), NamedReference(name="Q"))

    def test_multiple_defaults_keep_relative_order(self):
        """Test every default precedes every declared policy."""
        defaults = (NamedReference(name="P1"), NamedReference(name="P2"))

        augmented = route(policies=["Q1", "Q2"]).with_default_policies(defaults)

        assert [policy.name for policy in augmented.policies] == ["P1", "P2", "Q1", "Q2"]

    def test_route_without_config_is_unchanged(self):
        """Test routes with no config get no defaults."""
        original = route()

        augmented = original.with_default_policies((NamedReference(name="P"),))

        assert augmented is original
        assert augmented.policies == ()
        assert augmented.config is None

    def test_route_with_empty_policies_is_unchanged(self):
        """Test an empty declared list is not augmented."""
        original = route(policies=[])

        augmented = original.with_default_policies((NamedReference(name="P"),))

        assert augmented is original
        assert augmented.config.policies == ()

    def test_route_with_only_middlewares_is_unchanged(self):
        """Test middlewares alone do not trigger injection."""
        original = route(middlewares=["cache"])

        augmented = original.with_default_policies((NamedReference(name="P"),))

        assert augmented.policies == ()

    def test_original_descriptor_is_not_modified(self):
        """Test injection returns a copy."""
        original = route(policies=["Q"])

        original.with_default_policies((NamedReference(name="P"),))

        assert original.policies == (NamedReference(name="Q"),)

    def test_declared_prefix_survives_injection(self):
        """Test the copy keeps prefix presence and middlewares."""
        original = route(policies=["Q"], middlewares=["cache"], prefix="")

        augmented = original.with_default_policies((NamedReference(name="P"),))

        assert augmented.config.declares_prefix is True
        assert augmented.middlewares == (NamedReference(name="cache"),)
