"""Tests for shopstore/domain/models/category.py."""

from shopstore.domain.models import MAX_DATETIME, Category, CategoryStatus


# --- defaults ---

def test_new_category_defaults():
    category = Category.new()
    assert category.status == CategoryStatus.DRAFT
    assert category.title == ""
    assert category.parent_id == ""
    assert category.description == ""
    assert category.memo == ""
    assert category.is_root() is True


# --- accessors ---

def test_setters_chain_and_getters_read_back():
    category = Category()
    assert category.set_description("desc") is category
    category.set_memo("memo").set_parent_id("parent").set_title("title")
    assert category.description == "desc"
    assert category.memo == "memo"
    assert category.parent_id == "parent"
    assert category.title == "title"
    assert category.is_root() is False


def test_data_tracking_counts_four_changes():
    category = Category()
    category.set_title("Title").set_description("Desc").set_memo("Memo").set_parent_id("parent")
    assert category.data()["title"] == "Title"
    assert len(category.data_changed()) == 4
    category.mark_as_not_dirty()
    assert category.data_changed() == {}
    category.set_title("Updated")
    assert category.data_changed() == {"title": "Updated"}


# --- status ---

def test_status_predicates():
    category = Category().set_status(CategoryStatus.ACTIVE)
    assert category.is_active() is True
    assert category.is_draft() is False
    category.set_status(CategoryStatus.DRAFT)
    assert category.is_draft() is True
    category.set_status(CategoryStatus.INACTIVE)
    assert category.is_inactive() is True


def test_status_predicates_accept_plain_strings():
    assert Category().set_status("active").is_active() is True


def test_unknown_status_matches_no_predicate():
    category = Category().set_status("archived")
    assert not (category.is_active() or category.is_draft() or category.is_inactive())


# --- soft delete ---

def test_is_soft_deleted_follows_sentinel():
    category = Category().set_soft_deleted_at(MAX_DATETIME)
    assert category.is_soft_deleted() is False
    category.set_soft_deleted_at("2024-01-01 00:00:00")
    assert category.is_soft_deleted() is True
