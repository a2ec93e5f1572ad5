import pytest

from domain.taxonomy.tree import build_forest, iter_paths
from domain.taxonomy.view import TreeView


@pytest.fixture
def forest(make_record):
    # A
    #   B
    #     C
    #   D
    # E
    #   F
    return build_forest(
        [
            make_record("A"),
            make_record("B", "A"),
            make_record("C", "B"),
            make_record("D", "A"),
            make_record("E"),
            make_record("F", "E"),
        ]
    )


def _visible_ids(view: TreeView) -> list[str]:
    return [row.path[-1] for row in view.visible_rows()]


def test_collapsed_forest_shows_only_roots(forest) -> None:
    view = TreeView(forest)
    assert _visible_ids(view) == ["A", "E"]
    assert view.selection == ("A",)
    assert view.selected_index() == 0
    assert view.visible_count() == 2


def test_empty_forest_has_no_selection() -> None:
    view = TreeView(())
    assert view.selection is None
    assert view.selected_index() is None
    assert view.visible_count() == 0
    view.move_down()
    view.move_left()
    view.toggle()
    assert view.selection is None


def test_right_opens_and_left_closes(forest) -> None:
    view = TreeView(forest)
    view.move_right()
    assert ("A",) in view.open
    assert view.selection == ("A",)
    assert _visible_ids(view) == ["A", "B", "D", "E"]

    view.move_left()
    assert ("A",) not in view.open
    assert _visible_ids(view) == ["A", "E"]


def test_right_on_leaf_is_noop(forest) -> None:
    view = TreeView(forest)
    view.move_right()
    view.move_down()  # B
    view.move_right()
    view.move_down()  # C
    assert view.selection == ("A", "B", "C")
    before = set(view.open)
    view.move_right()
    assert view.open == before


def test_left_on_closed_node_selects_parent(forest) -> None:
    view = TreeView(forest)
    view.move_right()
    view.move_down()
    assert view.selection == ("A", "B")
    view.move_left()
    assert view.selection == ("A",)


def test_left_on_closed_root_is_noop(forest) -> None:
    view = TreeView(forest)
    view.move_left()
    assert view.selection == ("A",)
    assert view.open == set()


def test_down_and_up_are_clamped(forest) -> None:
    view = TreeView(forest)
    view.move_up()
    assert view.selection == ("A",)
    view.move_down()
    view.move_down()
    view.move_down()
    assert view.selection == ("E",)


def test_toggle_flips_without_moving(forest) -> None:
    view = TreeView(forest)
    view.toggle()
    assert ("A",) in view.open
    assert view.selection == ("A",)
    view.toggle()
    assert ("A",) not in view.open


def test_closing_parent_keeps_children_open_state(forest) -> None:
    view = TreeView(forest)
    view.move_right()
    view.move_down()
    view.move_right()  # open B
    view.move_up()
    view.move_left()  # close A
    assert ("A", "B") in view.open
    view.move_right()
    assert _visible_ids(view) == ["A", "B", "C", "D", "E"]


def test_selected_index_counts_down_moves_when_fully_expanded(forest) -> None:
    view = TreeView()
    view.reset(forest, expand_all=True)
    total = view.visible_count()
    assert total == 6

    for moves in range(1, 10):
        view.move_down()
        assert view.selected_index() == min(moves, total - 1)


def test_paging_moves_page_size_rows_and_clamps(make_record) -> None:
    records = [make_record("root")] + [make_record(f"n{i:02d}", "root") for i in range(25)]
    view = TreeView(page_size=10)
    view.reset(build_forest(records), expand_all=True)

    view.page_down()
    assert view.selected_index() == 10
    view.page_down()
    assert view.selected_index() == 20
    view.page_down()
    assert view.selected_index() == 25
    view.page_up()
    assert view.selected_index() == 15
    view.page_up()
    view.page_up()
    assert view.selected_index() == 0


def test_reset_with_expand_all_opens_every_branch(forest) -> None:
    view = TreeView(forest)
    view.move_down()
    view.reset(forest, expand_all=True)

    assert view.open == set(iter_paths(forest, branches_only=True))
    assert view.selection == ("A",)
    assert _visible_ids(view) == ["A", "B", "C", "D", "E", "F"]


def test_reset_without_expand_clears_open_set(forest) -> None:
    view = TreeView(forest)
    view.move_right()
    view.reset(forest)
    assert view.open == set()
    assert view.selection == ("A",)


def test_depths_follow_paths(forest) -> None:
    view = TreeView()
    view.reset(forest, expand_all=True)
    assert [r.depth for r in view.visible_rows()] == [0, 1, 2, 1, 0, 1]


def test_selected_node_resolves_path(forest) -> None:
    view = TreeView()
    view.reset(forest, expand_all=True)
    view.move_down()
    view.move_down()
    node = view.selected_node()
    assert node is not None and node.id == "C"


def test_invalid_page_size_rejected() -> None:
    with pytest.raises(ValueError):
        TreeView(page_size=0)
