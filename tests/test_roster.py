import pytest

from giftdraw.errors import InvalidInput, RosterConflict
from giftdraw.services import roster


def test_replace_all_assigns_sequential_ids(ctx):
    count = roster.replace_all(["Alice", "Bob", "Carol"])

    assert count == 3
    assert [p.to_public_dict() for p in roster.list_all()] == [
        {"id": 1, "name": "Alice"},
        {"id": 2, "name": "Bob"},
        {"id": 3, "name": "Carol"},
    ]
    assert roster.list_taken_targets() == set()


def test_replace_all_trims_and_drops_blanks(ctx):
    count = roster.replace_all(["  Alice ", "", "   ", None, 42, "Bob"])

    assert count == 2
    assert [(p.id, p.name) for p in roster.list_all()] == [(1, "Alice"), (2, "Bob")]


@pytest.mark.parametrize("names", [[], [""], ["  ", None]])
def test_replace_all_rejects_empty_roster(ctx, names):
    with pytest.raises(InvalidInput):
        roster.replace_all(names)


def test_replace_all_duplicate_name_is_conflict(ctx):
    with pytest.raises(RosterConflict):
        roster.replace_all(["Alice", "Bob", " Alice"])


def test_replace_all_discards_previous_generation(ctx):
    roster.replace_all(["Alice", "Bob", "Carol", "Dave"])
    roster.replace_all(["Zed", "Yan"])

    assert roster.count() == 2
    assert roster.find_by_name("Alice") is None
    assert roster.find_by_id(2).name == "Yan"
    assert roster.find_by_id(3) is None


def test_find_by_name_is_exact(ctx):
    roster.replace_all(["Alice", "Bob"])

    assert roster.find_by_name("Alice").id == 1
    assert roster.find_by_name("alice") is None


def test_admin_rows_resolve_target_names(ctx):
    from giftdraw.services.selections import attempt_select

    roster.replace_all(["Alice", "Bob", "Carol"])
    attempt_select(1, 3)

    assert roster.admin_rows() == [
        {"id": 1, "name": "Alice", "selectedPlayerId": 3, "selectedPlayerName": "Carol"},
        {"id": 2, "name": "Bob", "selectedPlayerId": None, "selectedPlayerName": None},
        {"id": 3, "name": "Carol", "selectedPlayerId": None, "selectedPlayerName": None},
    ]


def test_parse_names_splits_lines_and_commas():
    assert roster.parse_names("Alice, Bob\n Carol \n\n,Dave,") == ["Alice", "Bob", "Carol", "Dave"]
    assert roster.parse_names("") == []


def test_find_by_id_out_of_range(ctx):
    roster.replace_all(["Alice"])

    assert roster.find_by_id(2**70) is None
    assert roster.find_by_id(0) is None


def test_failed_reseed_keeps_previous_roster_and_choices(ctx):
    from giftdraw.services.selections import attempt_select

    roster.replace_all(["Alice", "Bob", "Carol"])
    attempt_select(1, 2)

    with pytest.raises(RosterConflict, match="Zed"):
        roster.replace_all(["Zed", "Yan", " Zed "])

    assert [(p.id, p.name) for p in roster.list_all()] == [(1, "Alice"), (2, "Bob"), (3, "Carol")]
    assert roster.find_by_id(1).selected_target_id == 2


def test_reseed_redeclares_named_constraints(ctx):
    from sqlalchemy import inspect

    from giftdraw.extensions import db

    roster.replace_all(["Alice", "Bob"])
    roster.replace_all(["Carol", "Dave"])

    names = {uq["name"] for uq in inspect(db.engine).get_unique_constraints("participants")}
    assert {"uq_participants_name", "uq_participants_selected_target_id"} <= names
