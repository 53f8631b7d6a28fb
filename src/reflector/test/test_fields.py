#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

"""Tests for field enumeration."""

from reflector import new, new_from_type, ptr
from sample_types import (
    Account, Company, CustomType, Derived, Node, Person, Point, Venue,
)


def names(fields):
    return [f.name() for f in fields]


class TestFieldViews:
    """Non-flattened, flattened and exhaustive listings."""

    def test_fields_flattened(self):
        obj = new(Person())

        assert not obj.is_ptr()
        assert obj.is_struct_or_ptr_to_struct()
        assert names(obj.fields_flattened()) == ["name", "street", "number"]

    def test_fields(self):
        assert names(new(Person()).fields()) == ["name", "address"]

    def test_fields_all(self):
        fields = new(Person()).fields_all()

        assert names(fields) == ["name", "address", "street", "number"]
        assert fields[1].anonymous()
        assert not fields[2].anonymous()

    def test_fields_on_pointer(self):
        obj = new(ptr(Person()))

        assert obj.is_ptr()
        assert obj.is_struct_or_ptr_to_struct()
        assert names(obj.fields()) == ["name", "address"]
        assert names(obj.fields_flattened()) == ["name", "street", "number"]
        assert names(obj.fields_all()) == ["name", "address", "street", "number"]

    def test_counts_follow_embedding(self):
        obj = new(Person())
        outer, inner = 1, 2

        assert len(obj.fields()) == outer + 1
        assert len(obj.fields_flattened()) == outer + inner
        assert len(obj.fields_all()) == outer + 1 + inner

    def test_nested_embedding_is_depth_first(self):
        obj = new(Venue())

        assert names(obj.fields()) == ["title", "location", "capacity"]
        assert names(obj.fields_flattened()) == ["title", "city", "lat", "lon", "capacity"]
        assert names(obj.fields_all()) == [
            "title", "location", "city", "geo", "lat", "lon", "capacity",
        ]

    def test_nested_index_and_depth(self):
        lat = new(Venue()).field("lat")

        assert lat.index() == ("location", "geo", "lat")
        assert lat.depth() == 2

    def test_self_embedding_is_not_reentered(self):
        obj = new(Node())

        assert names(obj.fields_flattened()) == ["label", "inner"]
        assert names(obj.fields_all()) == ["label", "inner"]

    def test_from_type(self):
        assert names(new_from_type(Venue).fields_flattened()) == [
            "title", "city", "lat", "lon", "capacity",
        ]


class TestDoubleFields:
    """Field names declared along more than one embedding level."""

    def test_fields_all_lists_shadowed_twice(self):
        fields = new(Company()).fields_all()

        assert names(fields) == ["address", "street", "number", "number"]

    def test_find_double_fields(self):
        assert new(Company()).find_double_fields() == ["number"]

    def test_no_double_fields(self):
        assert new(Person()).find_double_fields() == []

    def test_shallowest_field_wins(self):
        company = Company(number=9)
        company.address.number = 4

        field = new(company).field("number")
        assert field.depth() == 0
        assert field.get() == 9


class TestNonStruct:
    """Named scalars and other non-struct kinds."""

    def test_no_fields_for_custom_type(self):
        ct = CustomType(2)

        assert new(CustomType(1)).fields() == []
        assert new(ptr(ct)).fields() == []
        assert new(ptr(ct)).fields_flattened() == []
        assert new(ptr(ct)).fields_all() == []

    def test_is_struct_for_custom_types(self):
        ct = CustomType(2)

        assert not new(CustomType(1)).is_ptr()
        assert new(ptr(ct)).is_ptr()
        assert not new(CustomType(1)).is_struct_or_ptr_to_struct()
        assert not new(ptr(ct)).is_struct_or_ptr_to_struct()

    def test_builtin_values(self):
        assert new(42).fields_all() == []
        assert new({"a": 1}).fields() == []
        assert new(ptr(None)).fields() == []

    def test_pointer_to_pointer_is_not_struct(self):
        assert not new(ptr(ptr(Person()))).is_struct_or_ptr_to_struct()


class TestDeclarations:
    """Which annotations count as fields."""

    def test_dataclass_inheritance_order(self):
        assert names(new(Derived()).fields()) == ["id", "label"]

    def test_class_var_is_not_a_field(self):
        assert not new(Derived()).field("kind").valid()

    def test_private_fields_are_listed(self):
        assert names(new(Account()).fields()) == ["owner", "_balance"]

    def test_dataclass_fields(self):
        assert names(new(Point()).fields()) == ["x", "y"]
