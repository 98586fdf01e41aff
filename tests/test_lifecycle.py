"""
Tests for the page load sequence.

Run with: pytest tests/test_lifecycle.py -v
"""

import pytest

from wxp_mixins.compose import noop
from wxp_mixins.lifecycle import LoadSequencer


class TestLoadSequencer:
    """Test the before, native, after load sequence."""

    @pytest.fixture
    def calls(self):
        return []

    @pytest.fixture
    def sequencer(self, calls):
        def before(*args, **kwargs):
            calls.append(("before", args, kwargs))
            return "ignored"

        def native(*args, **kwargs):
            calls.append(("native", args, kwargs))
            return "ignored"

        def after(*args, **kwargs):
            calls.append(("after", args, kwargs))

        return LoadSequencer(before, native, after)

    def test_order(self, sequencer, calls):
        """Test the steps run before, native, after."""
        sequencer.on_load({"id": "1"})

        assert [name for name, _, _ in calls] == ["before", "native", "after"]

    def test_same_arguments(self, sequencer, calls):
        """Test every step receives the original arguments."""
        sequencer({"id": "1"}, scene=1001)

        assert all(args == ({"id": "1"},) for _, args, _ in calls)
        assert all(kwargs == {"scene": 1001} for _, _, kwargs in calls)

    def test_returns_none(self, sequencer):
        """Test return values are not threaded or returned."""
        assert sequencer.on_load() is None

    def test_defaults_to_noop(self):
        """Test missing steps are no-ops."""
        sequencer = LoadSequencer()

        assert sequencer.on_before_load is noop
        assert sequencer.on_native_load is noop
        assert sequencer.on_after_load is noop
        assert sequencer({"q": 1}) is None

    def test_binds_to_instance(self):
        """Test each step sees the page instance as self."""
        seen = []

        def before(self, query):
            seen.append(("before", self))

        def native(self, query):
            seen.append(("native", self))

        Page = type("Page", (), {"onLoad": LoadSequencer(before, native)})
        page = Page()
        page.onLoad({})

        assert seen == [("before", page), ("native", page)]

    def test_error_stops_sequence(self, calls):
        """Test a failing step propagates and later steps do not run."""

        def native(query):
            raise RuntimeError("load failed")

        def after(query):
            calls.append("after")

        sequencer = LoadSequencer(on_native_load=native, on_after_load=after)

        with pytest.raises(RuntimeError, match="load failed"):
            sequencer({})

        assert calls == []
