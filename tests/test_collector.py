"""
Tests for collecting data and methods from mixins.

Run with: pytest tests/test_collector.py -v
"""

from wxp_mixins.collector import CollectedMethods, collect_data, collect_methods
from wxp_mixins.config.defaults import PAGE_EVENTS
from wxp_mixins.models import Mixin


def handler_a(*args):
    return "a"


def handler_b(*args):
    return "b"


class TestCollectData:
    """Test merging data across mixins."""

    def test_later_mixin_wins(self):
        """Test the later mixin overwrites an earlier one on the same key."""
        mixins = [
            Mixin(data={"a": 2, "b": 2}),
            Mixin(data={"b": 3, "c": 3}),
        ]

        assert collect_data(mixins) == {"a": 2, "b": 3, "c": 3}

    def test_empty(self):
        """Test no mixins yields no data."""
        assert collect_data([]) == {}

    def test_missing_data(self):
        """Test mixins without data contribute nothing."""
        assert collect_data([Mixin(), Mixin(data={"a": 1})]) == {"a": 1}

    def test_does_not_mutate_mixins(self):
        """Test mixin data is copied, not aliased."""
        mixin = Mixin(data={"a": 1})
        merged = collect_data([mixin])
        merged["a"] = 99

        assert mixin.data == {"a": 1}


class TestCollectMethods:
    """Test gathering methods and lifecycle handlers."""

    def test_methods_last_wins(self):
        """Test the later mixin's method replaces an earlier one."""
        mixins = [
            Mixin(methods={"share": handler_a}),
            Mixin(methods={"share": handler_b}),
        ]

        assert collect_methods(mixins).methods == {"share": handler_b}

    def test_non_callable_methods_skipped(self):
        """Test values that are not callable are ignored."""
        mixins = [Mixin(methods={"share": "text", "tap": [handler_a], "ok": handler_a})]

        assert collect_methods(mixins).methods == {"ok": handler_a}

    def test_on_load_method_ignored(self):
        """Test an onLoad entry in methods is never collected."""
        mixins = [Mixin(methods={"onLoad": handler_a})]

        collected = collect_methods(mixins)
        assert "onLoad" not in collected.methods
        assert "onLoad" not in collected.lifecycles

    def test_lifecycles_in_mixin_order(self):
        """Test lifecycle handlers are appended in mixin order."""
        mixins = [
            Mixin(onShow=handler_a),
            Mixin(),
            Mixin(onShow=handler_b, onHide=handler_a),
        ]

        collected = collect_methods(mixins)
        assert collected.lifecycles == {
            "onShow": [handler_a, handler_b],
            "onHide": [handler_a],
        }

    def test_on_load_lifecycle_ignored(self):
        """Test a top-level onLoad handler is never collected."""
        collected = collect_methods([Mixin(onLoad=handler_a)])

        assert collected.lifecycles == {}

    def test_unknown_properties_ignored(self):
        """Test properties outside the vocabulary are not handlers."""
        collected = collect_methods([Mixin(onBeforeLoad=handler_a, helper=handler_b)])

        assert len(collected) == 0

    def test_non_callable_lifecycle_skipped(self):
        """Test a non-callable lifecycle property is ignored."""
        collected = collect_methods([Mixin(onShow=123)])

        assert collected.lifecycles == {}

    def test_custom_vocabulary(self):
        """Test the event names and exclusions are injectable."""
        mixins = [Mixin(onTabItemTap=handler_a, onShow=handler_b)]

        collected = collect_methods(mixins, events=["onTabItemTap"], excluded=())
        assert collected.lifecycles == {"onTabItemTap": [handler_a]}

    def test_events_follow_vocabulary_order(self):
        """Test events are gathered for every name of the vocabulary."""
        kwargs = {name: handler_a for name in PAGE_EVENTS}
        collected = collect_methods([Mixin(**kwargs)])

        assert list(collected.lifecycles) == PAGE_EVENTS[1:]

    def test_separate_accumulators(self):
        """Test methods named after an event are not collected."""
        mixins = [
            Mixin(onShow=handler_a),
            Mixin(methods={"onShow": handler_b}),
        ]

        collected = collect_methods(mixins)
        assert collected.lifecycles == {"onShow": [handler_a]}
        assert collected.methods == {}

    def test_method_named_after_custom_event_skipped(self):
        """Test the skip follows the given vocabulary."""
        mixins = [Mixin(methods={"onTabItemTap": handler_a, "onShow": handler_b})]

        collected = collect_methods(mixins, events=["onTabItemTap"])
        assert collected.methods == {"onShow": handler_b}
        assert collected.lifecycles == {}

    def test_empty_result(self):
        """Test nothing collected from no mixins."""
        assert collect_methods([]) == CollectedMethods()
