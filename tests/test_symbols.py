import pytest

from refdoc.info import (
    AccessSpecifier,
    InfoType,
    Location,
    Reference,
    TagTypeKind,
    TemplateInfo,
    TemplateParamInfo,
)
from refdoc.symbols import (
    BaseRecordInfo,
    EnumInfo,
    EnumValueInfo,
    FieldTypeInfo,
    FunctionInfo,
    NamespaceInfo,
    RecordInfo,
    Scope,
    TypedefInfo,
    TypeInfo,
    reduce_children,
)

A = bytes([1] * 20)
B = bytes([2] * 20)


def test_reduce_children_appends_and_merges():
    children = [Reference(usr=A, name="", ref_type=InfoType.RECORD)]
    new = [
        Reference(usr=A, name="alpha", ref_type=InfoType.RECORD),
        Reference(usr=B, name="beta", ref_type=InfoType.RECORD),
    ]
    reduce_children(children, new)
    assert [c.name for c in children] == ["alpha", "beta"]


def test_enum_merge_fills_fields_and_locations():
    first = EnumInfo(usr=A, name="E", loc=[Location(5, "b.h")])
    second = EnumInfo(
        usr=A,
        scoped=True,
        members=[EnumValueInfo(name="x", value="0")],
        loc=[Location(1, "a.h"), Location(5, "b.h")],
        def_loc=Location(3, "a.cpp"),
    )
    first.merge(second)
    assert first.scoped is True
    assert [m.name for m in first.members] == ["x"]
    assert first.loc == sorted(first.loc)
    assert len(first.loc) == 2
    assert first.def_loc == Location(3, "a.cpp")
    assert first.name == "E"


def test_enum_merge_rejects_other_symbol():
    with pytest.raises(ValueError):
        EnumInfo(usr=A).merge(EnumInfo(usr=B))


def test_function_merge_takes_missing_fields():
    first = FunctionInfo(usr=A, name="f")
    tmpl = TemplateInfo(params=[TemplateParamInfo("class T")])
    second = FunctionInfo(
        usr=A,
        is_method=True,
        access=AccessSpecifier.PROTECTED,
        return_type=TypeInfo(Reference(name="int")),
        params=[FieldTypeInfo(name="n")],
        template=tmpl,
    )
    first.merge(second)
    assert first.is_method is True
    assert first.access is AccessSpecifier.PROTECTED
    assert first.return_type.type.name == "int"
    assert [p.name for p in first.params] == ["n"]
    assert first.template is tmpl


def test_function_merge_keeps_existing_fields():
    first = FunctionInfo(
        usr=A,
        access=AccessSpecifier.PRIVATE,
        params=[FieldTypeInfo(name="a")],
        return_type=TypeInfo(Reference(name="void")),
    )
    second = FunctionInfo(
        usr=A,
        access=AccessSpecifier.PROTECTED,
        params=[FieldTypeInfo(name="b")],
        return_type=TypeInfo(Reference(name="int")),
    )
    first.merge(second)
    assert first.access is AccessSpecifier.PRIVATE
    assert [p.name for p in first.params] == ["a"]
    assert first.return_type.type.name == "void"


def test_function_merge_rejects_other_kind():
    with pytest.raises(ValueError):
        FunctionInfo(usr=A).merge(EnumInfo(usr=A))


def test_namespace_merge_reduces_children():
    first = NamespaceInfo(
        usr=A,
        children=Scope(
            functions=[Reference(usr=A, ref_type=InfoType.FUNCTION)],
            enums=[EnumInfo(usr=A)],
        ),
    )
    second = NamespaceInfo(
        usr=A,
        name="ns",
        children=Scope(
            namespaces=[Reference(usr=B, name="inner", ref_type=InfoType.NAMESPACE)],
            functions=[Reference(usr=A, name="f", ref_type=InfoType.FUNCTION)],
            enums=[EnumInfo(usr=A, scoped=True)],
        ),
    )
    first.merge(second)
    assert first.name == "ns"
    assert [n.name for n in first.children.namespaces] == ["inner"]
    assert [f.name for f in first.children.functions] == ["f"]
    assert len(first.children.enums) == 1
    assert first.children.enums[0].scoped is True


def test_record_merge():
    first = RecordInfo(usr=A, name="R")
    second = RecordInfo(
        usr=A,
        tag_type=TagTypeKind.CLASS,
        is_type_def=True,
        bases=[BaseRecordInfo(usr=B, name="Base")],
        children=Scope(typedefs=[TypedefInfo(usr=B, name="T")]),
    )
    first.merge(second)
    assert first.tag_type is TagTypeKind.CLASS
    assert first.is_type_def is True
    assert [b.name for b in first.bases] == ["Base"]
    assert [t.name for t in first.children.typedefs] == ["T"]
    assert first.symbol_type() == "class"


def test_record_merge_keeps_non_default_tag():
    first = RecordInfo(usr=A, tag_type=TagTypeKind.UNION)
    first.merge(RecordInfo(usr=A, tag_type=TagTypeKind.CLASS))
    assert first.tag_type is TagTypeKind.UNION


def test_base_record_defaults():
    base = BaseRecordInfo(usr=B, name="Base")
    assert base.info_type is InfoType.RECORD
    assert base.access is AccessSpecifier.PUBLIC
    assert base.is_virtual is False


def test_typedef_merge():
    first = TypedefInfo(usr=A, name="T")
    second = TypedefInfo(usr=A, is_using=True, underlying=TypeInfo(Reference(name="int")))
    first.merge(second)
    assert first.is_using is True
    assert first.underlying.type.name == "int"
    assert first.info_type is InfoType.TYPEDEF