"""Property-based tests for decoder laws and error accumulation."""

from hypothesis import given
from hypothesis import strategies as st

from jsontyped import (
    MISSING_FIELD,
    Arr,
    Err,
    ErrorKind,
    NonEmpty,
    Obj,
    Ok,
    Val,
    apply,
    field,
    field_with_fallback,
    fmap,
    integer,
    lift,
    list_of,
    number,
    optional_field,
    recover_with,
    string,
    succeed,
)

json_scalars = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.floats(allow_nan=False),
    st.text(max_size=10),
)

json_values = st.recursive(
    json_scalars,
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        st.dictionaries(st.text(max_size=5), children, max_size=4),
    ),
    max_leaves=10,
)

non_strings = json_values.filter(lambda v: not isinstance(v, str))
non_numbers = json_values.filter(
    lambda v: isinstance(v, bool) or not isinstance(v, (int, float))
)
field_names = st.text(
    alphabet=st.characters(whitelist_categories=("Ll", "Lu")), min_size=1, max_size=8
)


class TestPrimitiveProperties:
    @given(st.text())
    def test_strings_decode(self, s):
        assert string(s) == Ok(s)

    @given(non_strings)
    def test_non_strings_fail(self, v):
        assert string(v) == Err(Val(ErrorKind.EXPECTED_STRING, v))

    @given(st.integers(min_value=-(2**53), max_value=2**53))
    def test_integers_decode(self, n):
        assert integer(n) == Ok(n)
        assert integer(float(n)) == Ok(int(float(n)))

    @given(st.floats(allow_nan=False, allow_infinity=False))
    def test_fractional_floats_fail_as_int(self, x):
        if x.is_integer():
            assert integer(x) == Ok(int(x))
        else:
            assert integer(x) == Err(Val(ErrorKind.EXPECTED_INT, x))

    @given(non_numbers)
    def test_non_numbers_fail_as_number(self, v):
        assert integer(v) == Err(Val(ErrorKind.EXPECTED_NUMBER, v))
        assert number(v) == Err(Val(ErrorKind.EXPECTED_NUMBER, v))


class TestArrayProperties:
    @given(st.lists(json_values, max_size=8))
    def test_every_failing_index_reported(self, items):
        result = list_of(string)(items)
        failing = [i for i, item in enumerate(items) if not isinstance(item, str)]
        if failing:
            assert isinstance(result, Err)
            assert isinstance(result.error, Arr)
            assert [i for i, _ in result.error.errors] == failing
        else:
            assert result == Ok(items)


class TestApplicativeProperties:
    @given(json_values)
    def test_identity(self, v):
        assert apply(succeed(lambda x: x), integer)(v) == integer(v)

    @given(json_values)
    def test_homomorphism(self, v):
        assert apply(succeed(len), succeed("abc"))(v) == succeed(3)(v)

    @given(json_values)
    def test_fmap_composition(self, v):
        f = fmap(lambda s: s + "!", fmap(str.upper, string))
        g = fmap(lambda s: s.upper() + "!", string)
        assert f(v) == g(v)

    @given(st.lists(field_names, min_size=1, max_size=5, unique=True))
    def test_all_missing_fields_reported_in_order(self, names):
        decoder = lift(lambda *values: values, *(field(n, integer) for n in names))
        result = decoder({})
        assert result == Err(
            Obj(
                NonEmpty.from_iterable(
                    (n, MISSING_FIELD) for n in names
                )
            )
        )


class TestRecoveryProperties:
    @given(json_values, st.integers())
    def test_fallback_is_total(self, v, default):
        result = field_with_fallback("x", integer, default)({"x": v})
        assert isinstance(result, Ok)

    @given(json_values)
    def test_recover_with_only_replaces_errors(self, v):
        original = integer(v)
        recovered = recover_with(-1, original)
        if isinstance(original, Ok):
            assert recovered == original
        else:
            assert recovered == Ok(-1)

    @given(st.dictionaries(field_names, json_scalars, max_size=4))
    def test_optional_field_absent_is_none(self, payload):
        payload.pop("target", None)
        assert optional_field("target", integer)(payload) == Ok(None)
