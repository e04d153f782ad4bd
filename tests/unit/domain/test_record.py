"""Tests for shopstore/domain/models/record.py."""

from shopstore.domain.models.record import AttributeRecord


# --- get / set ---

def test_get_missing_attribute_returns_empty_string():
    assert AttributeRecord().get("title") == ""


def test_set_stores_value():
    record = AttributeRecord().set("title", "Mug")
    assert record.get("title") == "Mug"


def test_set_returns_same_record_for_chaining():
    record = AttributeRecord()
    assert record.set("title", "Mug") is record


def test_repeated_set_keeps_latest_value():
    record = AttributeRecord().set("title", "a").set("title", "b")
    assert record.data_changed() == {"title": "b"}


def test_has_reports_presence():
    record = AttributeRecord({"title": ""})
    assert record.has("title") is True
    assert record.has("memo") is False


# --- hydration ---

def test_hydrated_record_is_clean():
    record = AttributeRecord.from_existing({"id": "1", "title": "Mug"})
    assert record.data_changed() == {}
    assert record.is_dirty() is False


def test_hydration_copies_source_mapping():
    source = {"title": "Mug"}
    record = AttributeRecord(source)
    source["title"] = "Cup"
    assert record.get("title") == "Mug"


# --- dirty tracking ---

def test_set_marks_attribute_dirty():
    record = AttributeRecord({"title": "Mug"})
    record.set("memo", "x")
    assert record.data_changed() == {"memo": "x"}
    assert record.is_dirty("memo") is True
    assert record.is_dirty("title") is False


def test_setting_same_value_still_marks_dirty():
    record = AttributeRecord({"title": "Mug"})
    record.set("title", "Mug")
    assert record.data_changed() == {"title": "Mug"}


def test_mark_as_not_dirty_keeps_values():
    record = AttributeRecord().set("title", "Mug")
    record.mark_as_not_dirty()
    assert record.data_changed() == {}
    assert record.get("title") == "Mug"


def test_mark_as_not_dirty_is_idempotent():
    record = AttributeRecord().set("title", "Mug")
    record.mark_as_not_dirty()
    record.mark_as_not_dirty()
    assert record.data_changed() == {}


def test_changed_grows_with_each_new_attribute():
    record = AttributeRecord()
    record.set("title", "a")
    record.set("memo", "b").set("status", "c")
    assert record.data_changed() == {"title": "a", "memo": "b", "status": "c"}


# --- data() isolation ---

def test_data_returns_full_map():
    record = AttributeRecord({"id": "1"}).set("title", "Mug")
    assert record.data() == {"id": "1", "title": "Mug"}


def test_mutating_data_copy_does_not_bypass_tracking():
    record = AttributeRecord({"title": "Mug"})
    record.data()["title"] = "Cup"
    assert record.get("title") == "Mug"
    assert record.data_changed() == {}


def test_reading_does_not_mark_dirty():
    record = AttributeRecord({"title": "Mug"})
    record.get("title")
    record.data()
    assert record.is_dirty() is False
