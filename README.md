# refdoc

`refdoc` holds a model of documented C and C++ symbols (namespaces, records,
functions, enums, typedefs and their doc comments) and turns a collection of
them into reference documentation, either as one XML document or as one
Asciidoc page.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Overview

- `refdoc.info`: the common metadata. `Info` carries the symbol id (`usr`),
  name, path, enclosing namespaces and doc comment; `SymbolInfo` adds a
  definition location and a sorted, de-duplicated list of other locations.
  Also `Reference`, `Location`, `TemplateInfo`, the enums `InfoType`,
  `AccessSpecifier` and `TagTypeKind`, and helpers such as `to_hex` and
  `calculate_relative_file_path`.
- `refdoc.symbols`: `NamespaceInfo`, `RecordInfo`, `BaseRecordInfo`,
  `FunctionInfo`, `EnumInfo` and `TypedefInfo`, with `Scope`, `TypeInfo`,
  `FieldTypeInfo`, `MemberTypeInfo` and `EnumValueInfo`. Each symbol class has
  a `merge` method that combines two declarations of the same symbol, keeping
  what the first already has and filling gaps from the second; merging infos
  of different symbols raises `ValueError`. `reduce_children` merges child
  lists by symbol id.
- `refdoc.javadoc`: doc comments as a tree of nodes (`Text`, `StyledText`,
  `Paragraph`, `Brief`, `Admonition`, `Code`, `Param`, `TParam`, `Returns`),
  collected in a `Javadoc`. `Javadoc.calculate_brief()` moves the brief
  paragraph out of the blocks: an explicit `Brief` wins, otherwise the first
  plain paragraph.
- `refdoc.corpus`: `Corpus` maps symbol ids to infos. `add` merges a repeated
  declaration into the existing entry; `get` raises `KeyError` for an unknown
  id, `find(symbol_id, kind)` returns `None` when missing or of another kind,
  and `exists` tests membership. `reduce_infos` merges a list of infos for one
  symbol into a fresh one.
- `refdoc.overloads`: `make_overload_sets(corpus, scope, predicate)` groups
  the accepted functions of a scope by name, sorted by name.
- `refdoc.writers`: `FlatWriter` and `RecursiveWriter`, the traversals the
  output formats are built on, with hook methods to override.
- `refdoc.generator`: the abstract `Generator` base class.
- `refdoc.xml_format`: `XMLGenerator` and `XMLWriter`, plus `xml_escape`.
- `refdoc.asciidoc`: `AsciidocGenerator` and `AsciidocWriter`.
- `refdoc.b64`, `refdoc.paths`, `refdoc.index`: base64 encoding of 20-byte
  symbol ids, path separator helpers (`convert_to_slash`, `make_dirsy`), and
  `Index`, a reference tree sorted case-insensitively by name.

## Example

```python
from refdoc.corpus import Corpus
from refdoc.symbols import NamespaceInfo
from refdoc.xml_format import XMLGenerator

corpus = Corpus()
corpus.add(NamespaceInfo())
# ... add records, functions, enums and typedefs ...

print(XMLGenerator().build_string(corpus))
```

Symbol ids are 20-byte values; the global namespace has the all-zero id, and
the XML writer requires it to be present in the corpus. In the output, ids
appear base64-encoded via `refdoc.b64.to_base64`.

## Writing files

Every generator has `build_string(corpus)`, which returns the text, and
`build_one(file_name, corpus)`, which writes it to one file, replacing any
existing one.

`XMLGenerator.build(output_path, corpus)` creates `output_path` as a
directory when it does not exist; if `output_path` is a directory it writes
`reference.xml` inside it, otherwise it writes to `output_path` itself.
`AsciidocGenerator.build(output_path, corpus)` always writes
`reference.adoc` inside `output_path`, which must already exist. Both return
the path of the file written. Failures are raised as exceptions.

## What it does not do

`refdoc` does not read C or C++ source code: it has no parser and no command
line tool. The corpus has to be filled by the caller with the symbol classes
above. It also has no storage format for symbol metadata other than the
generated documentation.