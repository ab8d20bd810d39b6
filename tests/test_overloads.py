from refdoc.corpus import Corpus
from refdoc.info import AccessSpecifier, InfoType, Reference
from refdoc.overloads import OverloadSet, make_overload_sets
from refdoc.symbols import FunctionInfo, Scope


def _sid(n):
    return bytes([n] * 20)


def _setup(specs):
    corpus = Corpus()
    scope = Scope()
    for n, (name, access) in enumerate(specs, start=1):
        info = FunctionInfo(usr=_sid(n), name=name, access=access)
        corpus.add(info)
        scope.functions.append(Reference(usr=_sid(n), name=name, ref_type=InfoType.FUNCTION))
    return corpus, scope


def test_groups_by_name_in_sorted_order():
    pub = AccessSpecifier.PUBLIC
    corpus, scope = _setup([("zeta", pub), ("alpha", pub), ("zeta", pub)])
    sets = make_overload_sets(corpus, scope, lambda f: True)
    assert [s.name for s in sets] == ["alpha", "zeta"]
    assert [len(s.functions) for s in sets] == [1, 2]
    assert all(f.name == s.name for s in sets for f in s.functions)


def test_predicate_filters():
    corpus, scope = _setup(
        [("a", AccessSpecifier.PUBLIC), ("b", AccessSpecifier.PRIVATE)]
    )
    sets = make_overload_sets(
        corpus, scope, lambda f: f.access is AccessSpecifier.PRIVATE
    )
    assert [s.name for s in sets] == ["b"]


def test_empty_result():
    corpus, scope = _setup([("a", AccessSpecifier.PUBLIC)])
    assert make_overload_sets(corpus, scope, lambda f: False) == []
    assert make_overload_sets(Corpus(), Scope(), lambda f: True) == []


def test_overload_set_keeps_function_objects():
    corpus, scope = _setup([("f", AccessSpecifier.PUBLIC)])
    (only,) = make_overload_sets(corpus, scope, lambda f: True)
    assert only == OverloadSet("f", [corpus.get(_sid(1))])