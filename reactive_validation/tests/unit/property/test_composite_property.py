"""Unit tests for composite properties."""

from unittest.mock import MagicMock

import numpy as np

from reactive_validation.property import (
    CompositeReadableProperty,
    CompositeWritableProperty,
    SimpleProperty,
)


class TestCompositeReadableProperty:
    """Tests for CompositeReadableProperty."""

    def test_value_is_list_of_sub_values(self) -> None:
        """The value lists sub-property values in order."""
        composite = CompositeReadableProperty([SimpleProperty(1), SimpleProperty(2)])

        assert composite.get_value() == [1, 2]

    def test_sub_change_gives_single_notification(self, listener) -> None:
        """[1, 2] -> [5, 2] is notified exactly once."""
        a, b = SimpleProperty(1), SimpleProperty(2)
        composite = CompositeReadableProperty([a, b])
        composite.add_value_change_listener(listener)

        a.set_value(5)

        assert listener.values == [([1, 2], [5, 2])]

    def test_array_valued_sub_properties(self, listener) -> None:
        """A change of an array-valued sub-property is notified once."""
        a = SimpleProperty(np.array([1.0, 2.0]))
        b = SimpleProperty(np.array([3.0, 4.0]))
        composite = CompositeReadableProperty([a, b])
        composite.add_value_change_listener(listener)

        a.set_value(np.array([5.0, 6.0]))
        a.set_value(np.array([5.0, 6.0]))

        assert len(listener.calls) == 1
        np.testing.assert_array_equal(composite.get_value()[0], [5.0, 6.0])

    def test_recompute_creates_new_list(self) -> None:
        """Old and new values are distinct list objects."""
        a = SimpleProperty(1)
        composite = CompositeReadableProperty([a])
        before = composite.get_value()

        a.set_value(2)

        assert before == [1]
        assert composite.get_value() == [2]

    def test_add_and_remove_recompute(self, listener) -> None:
        """Adding and removing sub-properties notify with the new list."""
        a, b = SimpleProperty("a"), SimpleProperty("b")
        composite = CompositeReadableProperty([a])
        composite.add_value_change_listener(listener)

        composite.add_property(b)
        composite.remove_property(a)

        assert listener.values == [(["a"], ["a", "b"]), (["a", "b"], ["b"])]
        assert composite.properties == [b]

    def test_removed_property_no_longer_observed(self, listener) -> None:
        """Changes of a removed sub-property are ignored."""
        a = SimpleProperty(1)
        composite = CompositeReadableProperty([a])
        composite.remove_property(a)
        composite.add_value_change_listener(listener)

        a.set_value(2)

        assert listener.calls == []

    def test_clear(self) -> None:
        """clear() removes all sub-properties and detaches from them."""
        a = SimpleProperty(1)
        composite = CompositeReadableProperty([a])

        composite.clear()

        assert composite.get_value() == []
        assert composite not in a.value_change_listeners

    def test_properties_returns_copy(self) -> None:
        """Mutating the returned list does not affect the composite."""
        composite = CompositeReadableProperty([SimpleProperty(1)])

        composite.properties.clear()

        assert len(composite.properties) == 1

    def test_deep_dispose_by_default(self) -> None:
        """By default dispose() disposes sub-properties."""
        sub = MagicMock()
        sub.get_value.return_value = 1
        composite = CompositeReadableProperty([sub])

        composite.dispose()

        sub.dispose.assert_called_once()
        assert composite.properties == []

    def test_shallow_dispose(self) -> None:
        """With deep_dispose=False only the composite's own listener is removed."""
        a = SimpleProperty(1)
        composite = CompositeReadableProperty([a], deep_dispose=False)

        composite.dispose()

        assert a.value_change_listeners == ()


class TestCompositeWritableProperty:
    """Tests for CompositeWritableProperty."""

    def test_broadcasts_to_all(self) -> None:
        """set_value() reaches every sub-property."""
        a, b = SimpleProperty(), SimpleProperty()
        composite = CompositeWritableProperty([a, b])

        composite.set_value(7)

        assert (a.get_value(), b.get_value()) == (7, 7)

    def test_late_added_property_gets_last_value(self) -> None:
        """add_property() immediately applies the last value."""
        composite = CompositeWritableProperty()
        composite.set_value("x")
        late = SimpleProperty()

        composite.add_property(late)

        assert late.get_value() == "x"

    def test_initial_value_applied(self) -> None:
        """An initial value is applied to the initial sub-properties."""
        a = SimpleProperty()

        CompositeWritableProperty([a], value=3)

        assert a.get_value() == 3

    def test_remove_does_not_revert(self) -> None:
        """A removed sub-property keeps its value and stops receiving new ones."""
        a = SimpleProperty()
        composite = CompositeWritableProperty([a])
        composite.set_value(1)

        composite.remove_property(a)
        composite.set_value(2)

        assert a.get_value() == 1
        assert composite.value == 2

    def test_shallow_dispose_by_default(self) -> None:
        """By default dispose() does not dispose sub-properties."""
        sub = MagicMock()
        composite = CompositeWritableProperty([sub])

        composite.dispose()

        sub.dispose.assert_not_called()
        assert composite.properties == []

    def test_deep_dispose(self) -> None:
        """With deep_dispose=True sub-properties are disposed."""
        sub = MagicMock()

        CompositeWritableProperty([sub], deep_dispose=True).dispose()

        sub.dispose.assert_called_once()
