"""Unit tests for post-definition checks."""

import warnings

import pytest

from assigns.checks import (
    ContextNotInitializedWarning,
    check_init_context,
    has_callable,
)
from assigns.schema import Assign, SourceSite


def context_set(name, **options):
    return Assign(
        kind="context",
        name=name,
        type="integer",
        options={"action": "set", **options},
        site=SourceSite(file="counter.py", line=4),
    )


def context_get(name):
    return Assign(
        kind="context",
        name=name,
        type="any",
        options={"action": "get", "from": object},
    )


class TestHasCallable:
    """Tests for the capability query."""

    @pytest.mark.unit
    def test_instance_method(self):
        """Methods are counted without self."""

        class C:
            def init_context(self, state):
                return state

        assert has_callable(C, "init_context", 1)
        assert not has_callable(C, "init_context", 2)

    @pytest.mark.unit
    def test_static_and_class_methods(self):
        """Static and class methods are supported."""

        class S:
            @staticmethod
            def init_context(state):
                return state

        class K:
            @classmethod
            def init_context(cls, state):
                return state

        assert has_callable(S, "init_context", 1)
        assert has_callable(K, "init_context", 1)

    @pytest.mark.unit
    def test_wrong_arity_or_missing(self):
        """Zero-argument methods and plain attributes do not count."""

        class Z:
            def init_context(self):
                return {}

        class A:
            init_context = {"count": 0}

        assert not has_callable(Z, "init_context", 1)
        assert not has_callable(A, "init_context", 1)
        assert not has_callable(object, "init_context", 1)

    @pytest.mark.unit
    def test_varargs_and_inheritance(self):
        """Variadic signatures bind and bases are searched."""

        class Base:
            def init_context(self, *args):
                return args

        class Child(Base):
            pass

        assert has_callable(Child, "init_context", 1)


class TestCheckInitContext:
    """Tests for the context completeness check."""

    @pytest.mark.unit
    def test_warns_for_set_without_init(self):
        """Each context set warns at its declaration line."""

        class Counter:
            pass

        with pytest.warns(ContextNotInitializedWarning) as record:
            messages = check_init_context(
                Counter, [context_set("count"), context_get("theme")]
            )

        assert len(messages) == 1
        assert '"count"' in messages[0]
        assert "init_context/1" in messages[0]
        assert record[0].filename == "counter.py"
        assert record[0].lineno == 4

    @pytest.mark.unit
    def test_only_children_also_warns(self):
        """Scope does not exempt a set from initialization."""

        class Counter:
            pass

        with pytest.warns(ContextNotInitializedWarning):
            messages = check_init_context(
                Counter, [context_set("count", scope="only_children")]
            )
        assert len(messages) == 1

    @pytest.mark.unit
    def test_no_warning_with_init(self):
        """An init_context/1 callback silences the check."""

        class Counter:
            def init_context(self, state):
                return {"count": 0}

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert check_init_context(Counter, [context_set("count")]) == []

    @pytest.mark.unit
    def test_gets_never_warn(self):
        """Context gets need no initializer."""

        class Reader:
            pass

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert check_init_context(Reader, [context_get("theme")]) == []
