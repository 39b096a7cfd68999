# xscrt

Runtime support for code that binds XML Schema documents to Python objects.
It uses only the standard library (`xml.dom.minidom` and `xml.sax`).

## What is in it

- `xscrt.schema_types`: the built-in XML Schema types. `Byte`,
  `UnsignedByte`, `Short`, `UnsignedShort`, `Int`, `UnsignedInt`, `Long`,
  `UnsignedLong` narrow parsed values to their bit width. `Boolean` treats
  `"true"` and `"1"` as true. `Float` holds single precision and `Double`
  holds double precision. The text types are `String`, `NormalizedString`,
  `Token`, `NMToken`, `Name`, `NCName`, `ID` and `AnyURI`. Alongside them
  are the reference types `IDREFBase` and `IDREF`.
  `register_type_info(type_map)` adds all of them to a type-info map.
- `xscrt.elements`: `Type`, the base of every value. A value knows its
  `container()` and `root()`. `register_id`, `unregister_id` and
  `lookup_id` register identities and carry them up to every container, and
  `get_idref` and `set_idref` record resolved references.
  `FundamentalType.from_text` parses a value from document text.
  `IdRegistrationError` is raised for a duplicate or unknown identity.
- `ID` and `IDREF`: an `ID` placed in a container with `set_container`
  registers that container under its name. `IDREF.get()` looks the name up
  at the root and returns `None` when nothing matches.
- `xscrt.idmap`: `IDMap` collects IDs (`add_id`) and references
  (`add_idref`) while a document is read. `resolve_idref()` links them and
  raises `UnresolvedIDREF` for a dangling reference. Adding `None` raises
  `NullEntryError`.
- `xscrt.typeinfo` and `xscrt.traversal`: `ExtendedTypeInfo` records a
  type's bases in the registry returned by `extended_type_info_map()`.
  `Dispatcher.dispatch(node)` calls the `Traverser`s mapped for the node's
  type. If none is mapped there, it works outwards through the base types,
  and once a type has been handled its bases are not handled again.
  `xscrt.schema_traversal.IDREFTraverser` follows a reference and
  dispatches its target.
- `xscrt.xml`: `Element` and `Attribute` wrap minidom nodes. The name
  helpers are `prefix`, `uq_name`, `ns_name`, `fq_name` (which gives
  `namespace#local`) and `ns_prefix`. `ns_prefix` raises `NoPrefixError`
  when a namespace is neither bound to a prefix nor the default.
- `xscrt.parser`: `Parser` hands out an element's child elements and
  attributes in order.
- `xscrt.writer`: `Writer`, a stack of elements with an optional current
  attribute. `FundamentalTypeWriter` and `IDREFWriter` write a value's text
  into that attribute or element.
- `xscrt.documents`:
  - `FileReader` and `BufferReader` parse a file or bytes, and `entity()`
    applies your reader function.
  - `FileWriter` and `BufferWriter` build a document around a root element.
    `write_entity()` applies your writer function.
  - `BufferWriter.write(size)` raises `ValueError` when the output does not
    fit.
- `xscrt.resolver`: SAX entity resolvers.
  - `SchemaResolver` wraps a resolver callable.
  - `NoOpResolver` resolves nothing.
  - `BasicResolver` puts a fixed path in front of the system id.
  - `PathResolver` uses the first search path where the file exists.
  - `EnvironmentResolver` builds search paths from environment variables.
  - `URLResolver` joins the system id to a base URL.
- `xscrt.helper` and `xscrt.error_handler`: `XMLHelper` and
  `XMLErrorHandler`.
  - `XMLHelper.create_dom(uri)` parses a document with namespaces and drops
    its comments. It returns `None` once the error handler has recorded an
    error.
  - `create_document`, `create_doctype` and `write_dom` create and save
    documents.
  - `XMLErrorHandler` prints `Kind: file:line:column - message` and
    remembers errors until `reset_errors()`.

## Installation

```
pip install .
```

## Examples

Resolving references:

```python
from xscrt.idmap import IDMap, UnresolvedIDREF
from xscrt.schema_types import Int, String

holder = String("owner")
target = Int(42)

ids = IDMap()
ids.add_id("answer", target)
ids.add_idref("answer", holder)
ids.resolve_idref()

assert holder.get_idref("answer") is target

ids.add_idref("missing", holder)
try:
    ids.resolve_idref()
except UnresolvedIDREF as exc:
    print("dangling reference:", exc)
```

Dispatching by type:

```python
from xscrt.schema_types import Int, register_type_info
from xscrt.traversal import Traverser
from xscrt.typeinfo import extended_type_info_map

register_type_info(extended_type_info_map())

seen = []

class CollectInts(Traverser):
    node_type = Int

    def traverse(self, node):
        seen.append(int(node))

CollectInts().dispatch(Int(7))
assert seen == [7]
```

Reading a document into your own object:

```python
from xscrt.documents import BufferReader

def load(document):
    return document.documentElement.getAttribute("name")

reader = BufferReader(load, "memory.xml")
reader.read(b'<config name="demo"/>')
print(reader.entity())  # demo
```

## What it does not do

- It is a library only. It has no command-line program.
- It does not compile schemas or generate binding classes. You write the
  reader and writer functions that connect your classes to documents.
- `XMLHelper.create_dom` checks that a document is well-formed. It does not
  validate the document against an XML Schema.

## Running the tests

```
pip install .[test]
pytest
```