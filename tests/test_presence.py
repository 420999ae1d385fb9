"""Tests for presence combinators."""

import typing

import pytest
from hypothesis import given
from hypothesis import strategies as st
from nullsafe import (
    Nothing,
    Some,
    absent_like,
    cast_to,
    filter_if,
    filter_if_not,
    if_present,
    if_present_do,
    map_or_absent,
    or_else,
    recover,
    recover_with,
)

from tests.strategies import absent_values, integers, maybe_values, payloads, present_values


class TestIfPresent:
    """Tests for if_present."""

    def test_string_length(self):
        """A present string is measured; an absent one yields the default."""
        assert if_present('hi', len, 0) == 2
        assert if_present(None, len, 0) == 0

    def test_some_payload_is_passed(self):
        """The function receives the payload, not the Some wrapper."""
        assert if_present(Some('abc'), len, 0) == 3
        assert if_present(Nothing, len, -1) == -1

    @given(absent_values, integers)
    def test_absent_never_invokes(self, value, default):
        """On absence the default is returned and fn is never called."""
        calls = []
        assert if_present(value, calls.append, default) == default
        assert calls == []

    @given(present_values)
    def test_present_invokes_once(self, value):
        """On presence fn runs exactly once and its result is returned."""
        calls = []

        def fn(x):
            calls.append(x)
            return ('mapped', x)

        result = if_present(value, fn, None)
        assert len(calls) == 1
        assert result == ('mapped', calls[0])

    def test_falsy_present_value_invokes(self, counter):
        """Zero is present and is passed to fn."""
        fn = counter(lambda x: x + 1)
        assert if_present(0, fn, 100) == 1
        assert fn.count == 1


class TestIfPresentDo:
    """Tests for if_present_do."""

    @given(maybe_values)
    def test_returns_input_unchanged(self, value):
        """The input object is always returned as-is."""
        assert if_present_do(value, lambda _: None) is value

    def test_action_called_with_payload(self, counter):
        """The action receives the payload when present."""
        action = counter()
        if_present_do(Some(5), action)
        if_present_do(7, action)
        assert action.calls == [(5,), (7,)]

    @pytest.mark.parametrize('value', [None, Nothing])
    def test_action_skipped_on_absence(self, value, counter):
        """The action is not called for absent values."""
        action = counter()
        assert if_present_do(value, action) is value
        assert action.count == 0

    def test_chaining(self):
        """Calls chain because the input is passed through."""
        seen = []
        value = if_present_do(if_present_do('x', seen.append), seen.append)
        assert value == 'x'
        assert seen == ['x', 'x']


class TestOrElse:
    """Tests for or_else, recover and recover_with."""

    @given(present_values, payloads)
    def test_present_value_wins(self, value, default):
        """A present value is returned unchanged."""
        assert or_else(value, default) is value

    @given(absent_values, payloads)
    def test_absent_value_substituted(self, value, default):
        """An absent value is replaced by the default."""
        assert or_else(value, default) is default

    @given(absent_values, payloads, payloads)
    def test_first_fallback_wins(self, value, d1, d2):
        """Chaining or_else keeps the first fallback."""
        assert or_else(or_else(value, d1), d2) is or_else(value, d1)

    def test_default_may_be_an_option(self):
        """The default is returned exactly as given."""
        assert or_else(Nothing, Some(3)) == Some(3)

    def test_recover_lazy(self, counter):
        """The supplier only runs on absence."""
        supplier = counter(lambda: 'built')
        assert recover('kept', supplier) == 'kept'
        assert supplier.count == 0
        assert recover(None, supplier) == 'built'
        assert supplier.count == 1

    def test_recover_with_precomputed(self):
        """recover_with substitutes a precomputed fallback."""
        assert recover_with(None, 'fallback') == 'fallback'
        assert recover_with(Nothing, 1) == 1
        assert recover_with(Some(2), 1) == Some(2)


class TestFilter:
    """Tests for filter_if and filter_if_not."""

    def test_filter_if_keeps_matching(self):
        """A present value satisfying the predicate is kept."""
        assert filter_if(4, lambda x: x % 2 == 0) == 4
        assert filter_if(Some(4), lambda x: x % 2 == 0) == Some(4)

    def test_filter_if_drops_non_matching(self):
        """A failing predicate yields the absent value of the same kind."""
        assert filter_if(3, lambda x: x % 2 == 0) is None
        assert filter_if(Some(3), lambda x: x % 2 == 0) == Nothing

    def test_filter_if_not_inverts(self):
        """filter_if_not keeps values the predicate rejects."""
        assert filter_if_not(3, lambda x: x % 2 == 0) == 3
        assert filter_if_not(4, lambda x: x % 2 == 0) is None
        assert filter_if_not(Some(4), lambda x: x % 2 == 0) == Nothing

    @pytest.mark.parametrize('combinator', [filter_if, filter_if_not])
    @pytest.mark.parametrize('value', [None, Nothing])
    def test_predicate_not_called_on_absence(self, combinator, value, counter):
        """The predicate only runs for present values."""
        predicate = counter(lambda _: True)
        result = combinator(value, predicate)
        assert predicate.count == 0
        assert result == value

    @given(integers)
    def test_exactly_one_filter_keeps(self, x):
        """For a present value, exactly one of the two filters keeps it."""
        kept = [f(x, lambda v: v > 0) for f in (filter_if, filter_if_not)]
        assert kept.count(x) == 1
        assert kept.count(None) == 1


class TestMapOrAbsent:
    """Tests for map_or_absent."""

    def test_present_applies_fn(self):
        """The function result is returned as-is."""
        assert map_or_absent({'a': 1}, lambda d: d.get('a')) == 1
        assert map_or_absent({'a': 1}, lambda d: d.get('b')) is None

    def test_absent_defaults_to_matching_absence(self, counter):
        """Without a default, absence mirrors the input representation."""
        fn = counter()
        assert map_or_absent(None, fn) is None
        assert map_or_absent(Nothing, fn) == Nothing
        assert fn.count == 0

    def test_explicit_default(self):
        """An explicit default is returned on absence, even None."""
        assert map_or_absent(Nothing, str, 'none') == 'none'
        assert map_or_absent(Nothing, str, None) is None

    def test_option_returning_fn(self):
        """Option-returning functions compose."""
        first = map_or_absent(Some([1, 2]), lambda xs: Some(xs[0]) if xs else Nothing)
        assert first == Some(1)


class Animal:
    pass


class Dog(Animal):
    pass


class TestCastTo:
    """Tests for cast_to."""

    def test_exact_type(self):
        """A matching type returns the value."""
        assert cast_to('x', str) == 'x'

    def test_subtype(self):
        """Subtypes match."""
        dog = Dog()
        assert cast_to(dog, Animal) is dog
        assert cast_to(True, int) is True

    def test_mismatch_is_absent(self):
        """A mismatching type yields the absent value of the same kind."""
        assert cast_to('x', int) is None
        assert cast_to(Some('x'), int) == Nothing
        assert cast_to(Animal(), Dog) is None

    def test_some_payload_tested(self):
        """For Some, the payload's type is tested and Some is returned."""
        assert cast_to(Some(1.5), float) == Some(1.5)

    def test_tuple_of_types(self):
        """Any entry of a tuple of types matches."""
        assert cast_to(3, (str, int)) == 3

    def test_parameterized_generic_checks_origin(self):
        """list[int] matches any list and rejects other types."""
        assert cast_to([1], list[int]) == [1]
        assert cast_to(['a'], list[int]) == ['a']
        assert cast_to('x', list[int]) is None
        assert cast_to(Some({}), dict[str, int]) == Some({})

    def test_union_types(self):
        """Union types match any member."""
        assert cast_to(1, int | str) == 1
        assert cast_to(1.5, int | str) is None
        assert cast_to(Some(None), int | None) == Some(None)

    def test_uncheckable_type_is_absent(self):
        """Types without a runtime check never match."""
        assert cast_to(1, typing.Any) is None
        assert cast_to(Some(1), typing.Any) == Nothing
        assert cast_to('a', typing.Literal['a']) is None

    def test_tuple_mixing_generics(self):
        """Each tuple entry is checked on its own."""
        assert cast_to([1], (str, list[int])) == [1]
        assert cast_to(3, (typing.Any, int)) == 3

    @given(
        maybe_values,
        st.sampled_from([int, str, bool, list, list[int], (int, str), Animal, typing.Any, int | str]),
    )
    def test_never_raises(self, value, cls):
        """cast_to returns the value itself or the matching absent value."""
        result = cast_to(value, cls)
        assert result is value or result is absent_like(value)
