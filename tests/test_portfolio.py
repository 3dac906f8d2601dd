import pytest

from recruit_form.core.portfolio import (
    add_link,
    empty_links,
    normalize_links,
    project_for_submission,
    remove_link,
    set_link,
)


def test_projection_drops_blank_entries():
    assert project_for_submission(["", "https://a.com", "", "b.com"]) == ["https://a.com", "b.com"]


def test_projection_treats_whitespace_as_blank():
    assert project_for_submission(["  ", "\t", "dribbble.com/ada"]) == ["dribbble.com/ada"]


def test_editing_keeps_blank_slots():
    links = add_link(empty_links())
    assert links == ["", ""]
    links = set_link(links, 1, "https://github.com/ada")
    assert links == ["", "https://github.com/ada"]


def test_set_link_out_of_range():
    with pytest.raises(IndexError):
        set_link([""], 3, "x.com")


def test_last_slot_cannot_be_removed():
    assert remove_link(["https://a.com"], 0) == ["https://a.com"]
    assert remove_link(["a.com", "b.com"], 0) == ["b.com"]


def test_remove_link_out_of_range():
    with pytest.raises(IndexError):
        remove_link(["a.com", "b.com"], 5)


def test_helpers_return_new_lists():
    links = ["a.com", ""]
    set_link(links, 0, "b.com")
    add_link(links)
    remove_link(links, 1)
    assert links == ["a.com", ""]


def test_normalize_restores_single_slot():
    assert normalize_links([]) == [""]
    assert normalize_links(["a.com"]) == ["a.com"]
