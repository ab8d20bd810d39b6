import io

import pytest

from refdoc.corpus import Corpus
from refdoc.info import EMPTY_SID, InfoType, Reference
from refdoc.symbols import (
    EnumInfo,
    FunctionInfo,
    NamespaceInfo,
    RecordInfo,
    Scope,
    TypedefInfo,
)
from refdoc.writers import AllSymbol, FlatWriter, RecursiveWriter

R_ID = bytes([1] * 20)
M_ID = bytes([2] * 20)
F_ID = bytes([3] * 20)


def _corpus():
    corpus = Corpus()
    corpus.add(
        NamespaceInfo(
            usr=EMPTY_SID,
            children=Scope(
                records=[Reference(usr=R_ID, name="R", ref_type=InfoType.RECORD)],
                functions=[Reference(usr=F_ID, name="f", ref_type=InfoType.FUNCTION)],
                enums=[EnumInfo(usr=bytes([4] * 20), name="E")],
                typedefs=[TypedefInfo(usr=bytes([5] * 20), name="T")],
            ),
        )
    )
    corpus.add(
        RecordInfo(
            usr=R_ID,
            name="R",
            children=Scope(
                functions=[Reference(usr=M_ID, name="m", ref_type=InfoType.FUNCTION)]
            ),
        )
    )
    corpus.add(
        FunctionInfo(
            usr=M_ID,
            name="m",
            is_method=True,
            namespace=[Reference(usr=R_ID, name="R", ref_type=InfoType.RECORD)],
        )
    )
    corpus.add(FunctionInfo(usr=F_ID, name="f"))
    return corpus


class _FlatRecorder(FlatWriter):
    def __init__(self, corpus):
        super().__init__(io.StringIO(), corpus)
        self.calls = []

    def write_record(self, info):
        self.calls.append(("record", info.name))

    def write_function(self, info):
        self.calls.append(("function", info.name))


class _Recorder(RecursiveWriter):
    def __init__(self, corpus):
        super().__init__(io.StringIO(), corpus)
        self.events = []

    def write_all_symbols(self, symbols):
        self.events.append(("all", len(symbols)))

    def begin_namespace(self, info):
        self.events.append(("ns", info.name))

    def end_namespace(self, info):
        self.events.append(("/ns", info.name))

    def begin_record(self, info):
        self.events.append(("record", info.name))

    def end_record(self, info):
        self.events.append(("/record", info.name))

    def write_function(self, info):
        self.indent().write(info.name + "\n")
        self.events.append(("function", info.name))

    def write_enum(self, info):
        self.events.append(("enum", info.name))

    def write_typedef(self, info):
        self.events.append(("typedef", info.name))


def test_flat_writer_visits_records_and_functions_in_order():
    writer = _FlatRecorder(_corpus())
    writer.visit_all_symbols()
    assert writer.calls == [("record", "R"), ("function", "m"), ("function", "f")]


def test_flat_writer_rejects_enum():
    corpus = Corpus()
    corpus.add(EnumInfo(usr=R_ID, name="E"))
    with pytest.raises(ValueError):
        _FlatRecorder(corpus).visit(R_ID)


def test_recursive_writer_order():
    writer = _Recorder(_corpus())
    writer.write()
    assert writer.events == [
        ("all", 4),
        ("ns", ""),
        ("record", "R"),
        ("function", "m"),
        ("/record", "R"),
        ("function", "f"),
        ("enum", "E"),
        ("typedef", "T"),
        ("/ns", ""),
    ]


def test_recursive_writer_indentation_grows_with_depth():
    writer = _Recorder(_corpus())
    writer.write()
    lines = writer.out.getvalue().splitlines()
    method = next(line for line in lines if line.strip() == "m")
    free = next(line for line in lines if line.strip() == "f")
    assert len(method) - len(method.lstrip()) > len(free) - len(free.lstrip())


def test_indentation_returns_to_zero():
    writer = _Recorder(_corpus())
    writer.write()
    writer.indent().write("x")
    assert writer.out.getvalue().endswith("\nx")


def test_adjust_nesting_below_zero_raises():
    writer = RecursiveWriter(io.StringIO(), Corpus())
    writer.adjust_nesting(1)
    writer.adjust_nesting(-1)
    with pytest.raises(ValueError):
        writer.adjust_nesting(-1)


def test_write_without_global_namespace_raises():
    with pytest.raises(KeyError):
        RecursiveWriter(io.StringIO(), Corpus()).write()


def test_make_all_symbols():
    symbols = RecursiveWriter(io.StringIO(), _corpus()).make_all_symbols()
    by_id = {s.id: s for s in symbols}
    assert by_id[M_ID] == AllSymbol("R::m", "function", M_ID)
    assert by_id[R_ID].symbol_type == "struct"
    assert by_id[EMPTY_SID].symbol_type == "namespace"