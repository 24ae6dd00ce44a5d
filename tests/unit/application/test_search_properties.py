"""Property-based tests for the search wire protocol."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from search_params.application.search import (
    Filter,
    FilterOperator,
    Paging,
    SearchParameters,
    Sorting,
    query_string,
)
from search_params.testing.generators import (
    filter_strategy,
    paging_strategy,
    search_parameters_strategy,
    sorting_strategy,
)

_text = st.text(alphabet=st.characters(exclude_categories=("Cs",)), max_size=10)

_wire_key = st.one_of(
    st.builds(
        "filters[{}][{}]".format,
        st.integers(min_value=0, max_value=20),
        st.sampled_from(["fields", "op", "val", "case"]),
    ),
    st.builds(
        "sortings[{}][{}]".format,
        st.integers(min_value=0, max_value=20),
        st.sampled_from(["prop", "ord"]),
    ),
    st.sampled_from(["skip", "take"]),
    _text,
)


class TestRoundTrip:
    @given(search_parameters_strategy())
    def test_dictionary_round_trip(self, params: SearchParameters) -> None:
        assert SearchParameters.from_dictionary(params.to_dictionary()) == params

    @given(search_parameters_strategy())
    def test_query_string_round_trip(self, params: SearchParameters) -> None:
        assert SearchParameters.from_query_string(params.to_query_string()) == params

    @given(filter_strategy())
    def test_filter_round_trip(self, f: Filter) -> None:
        assert Filter.from_dictionary(f.to_dictionary()) == f

    @given(sorting_strategy())
    def test_sorting_round_trip(self, s: Sorting) -> None:
        assert Sorting.from_dictionary(s.to_dictionary()) == s

    @given(paging_strategy())
    def test_paging_round_trip(self, p: Paging) -> None:
        assert Paging.from_dictionary(p.to_dictionary()) == p

    @given(st.dictionaries(_wire_key, _text, max_size=12))
    def test_encoded_dictionary_parses_like_unencoded(self, data: dict[str, str]) -> None:
        decoded = query_string.to_dict(query_string.decode(query_string.encode(data.items())))
        assert SearchParameters.from_dictionary(decoded) == SearchParameters.from_dictionary(data)


class TestWireInvariants:
    @given(
        st.lists(_text, min_size=1, max_size=3),
        st.sampled_from([FilterOperator.NULL, FilterOperator.NOT_NULL]),
        st.none() | _text,
        st.booleans(),
    )
    def test_unary_operator_never_has_val(
        self, fields: list[str], op: FilterOperator, value: str | None, case: bool
    ) -> None:
        assert "val" not in Filter(fields, op, value, case).to_dictionary()

    @given(filter_strategy())
    def test_case_key_only_when_sensitive(self, f: Filter) -> None:
        d = f.to_dictionary()
        if f.case_sensitive:
            assert d["case"] == "true"
        else:
            assert "case" not in d

    @given(st.lists(sorting_strategy(), max_size=8))
    def test_serialised_sortings_unique_by_property(self, sortings: list[Sorting]) -> None:
        d = SearchParameters(sortings=sortings).to_dictionary()
        props = [v for k, v in d.items() if k.endswith("[prop]")]
        assert len(props) == len(set(props))
        assert set(props) == {s.property for s in sortings}
