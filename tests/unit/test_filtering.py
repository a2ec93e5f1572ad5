import pytest

from domain.schemas import Category
from domain.taxonomy.filtering import FilterKind, RecordFilter, filter_records, matches_query


def _ids(records) -> list[str]:
    return [r.id for r in records]


# ----- Match predicate -----


def test_id_and_parent_require_exact_match(make_record) -> None:
    rec = make_record("123", "12", "Unrelated")
    assert matches_query(rec, "123")
    assert matches_query(rec, "12")
    assert not matches_query(rec, "1")


def test_free_text_fields_use_substring(make_record) -> None:
    rec = make_record(
        "9",
        None,
        "Home Audio Speakers",
        tiers=("Consumer Electronics", "Audio Equipment"),
        extension="Includes soundbars",
        category=Category.CONTENT,
    )
    assert matches_query(rec, "audio")
    assert matches_query(rec, "electronics")
    assert matches_query(rec, "soundbar")
    assert not matches_query(rec, "vinyl")


def test_query_is_case_insensitive_on_ids(make_record) -> None:
    rec = make_record("EzcdVr", None, "Podcasts")
    assert filter_records([rec], "EZCDVR") == [rec]


# ----- Closures -----


def test_match_on_leaf_pulls_in_ancestors(chain_records) -> None:
    assert _ids(filter_records(chain_records, "C")) == ["A", "B", "C"]


def test_match_on_root_pulls_in_subtree(chain_records) -> None:
    assert _ids(filter_records(chain_records, "A")) == ["A", "B", "C"]


def test_siblings_of_a_match_are_not_included(make_record) -> None:
    records = [
        make_record("A", None, "Root"),
        make_record("B", "A", "Target"),
        make_record("C", "A", "Other"),
        make_record("D", "B", "Below target"),
    ]
    assert _ids(filter_records(records, "target")) == ["A", "B", "D"]


def test_descendants_are_kept_when_a_match_is_also_an_ancestor(make_record) -> None:
    # B is an ancestor of match C and itself matches; its other child D must stay
    records = [
        make_record("A", None, "Root"),
        make_record("B", "A", "Hit parent"),
        make_record("C", "B", "Hit child"),
        make_record("D", "B", "Plain"),
    ]
    assert _ids(filter_records(records, "hit")) == ["A", "B", "C", "D"]


def test_result_preserves_input_order(make_record) -> None:
    records = [
        make_record("C", "A", "match"),
        make_record("X", None, "nope"),
        make_record("A", None, "root"),
    ]
    assert _ids(filter_records(records, "match")) == ["C", "A"]


def test_no_match_yields_empty(chain_records) -> None:
    assert filter_records(chain_records, "zzz") == []


def test_empty_query_returns_input_unchanged(chain_records) -> None:
    assert filter_records(chain_records, "") is chain_records


def test_cycle_does_not_hang_closures(make_record) -> None:
    records = [
        make_record("X", "Y", "cycle x"),
        make_record("Y", "X", "cycle y"),
        make_record("Z", "Y", "leaf"),
    ]
    assert _ids(filter_records(records, "leaf")) == ["X", "Y", "Z"]
    assert _ids(filter_records(records, "cycle x")) == ["X", "Y", "Z"]


def test_self_reference_does_not_hang(make_record) -> None:
    records = [make_record("S", "S", "self"), make_record("T", "S", "child")]
    assert _ids(filter_records(records, "child")) == ["S", "T"]


def test_dangling_parent_stops_ancestor_walk(make_record) -> None:
    records = [make_record("B", "ghost", "orphan")]
    assert _ids(filter_records(records, "orphan")) == ["B"]


@pytest.mark.parametrize("query", ["alpha", "B", "charlie", "a"])
def test_every_result_matches_or_is_related(chain_records, query: str) -> None:
    by_id = {r.id: r for r in chain_records}
    result = filter_records(chain_records, query)
    matched = {r.id for r in chain_records if matches_query(r, query.lower())}

    def ancestors(rid: str) -> set[str]:
        out, cur = set(), by_id[rid].parent_id
        while cur is not None and cur in by_id and cur not in out:
            out.add(cur)
            cur = by_id[cur].parent_id
        return out

    for rec in result:
        related = rec.id in matched or any(rec.id in ancestors(m) for m in matched) or bool(
            ancestors(rec.id) & matched
        )
        assert related, rec.id


# ----- Listing predicates -----


def test_record_filter_by_id_is_exact(chain_records) -> None:
    f = RecordFilter(kind=FilterKind.ID, value="B")
    assert _ids(f.apply(chain_records)) == ["B"]
    assert f.apply(chain_records[:1]) == []


def test_record_filter_by_parent_includes_the_parent_itself(chain_records) -> None:
    f = RecordFilter(kind=FilterKind.PARENT, value="A")
    assert _ids(f.apply(chain_records)) == ["A", "B"]


def test_record_filter_by_name_is_case_insensitive_substring(chain_records) -> None:
    f = RecordFilter(kind=FilterKind.NAME, value="RAV")
    assert _ids(f.apply(chain_records)) == ["B"]
