# papi

Building blocks for typed HTTP APIs with generated OpenAPI 3.0 documentation.

## What is inside

- `papi.router` – a tree router. Register routes with
  `Router.add(method, path, fn)` using `{name}` placeholders; `fn` receives
  the new `Route` (set its `handler` there). `Router.lookup(method, path)`
  returns `(handler, params)` or `None` when nothing matches. `Params`
  offers `get(key)` (the value or `None`), `value(idx)` (the value or an
  empty string) and `valid()`. `Router.clear()` removes all routes.
- `papi.scanner` – turns text into typed values: `scan_string(typ, src)`,
  `scan_bytes(typ, src)`, `create_scanner(typ)` and `Creator`, which can take
  a custom scanner factory. Supported types are `bool`, `int`, `float`,
  `complex`, `str`, sized integers (`IntType`, with `INT8` … `UINT64`),
  comma-separated `list[T]` and `tuple[T, ...]`, fixed-size tuples and
  `T | None`. Bad input raises `ValueError`; unsupported types raise
  `TypeError`.
- `papi.errors` – structured API errors. `FrozenError` is an immutable
  template; `explained()` and `detailed()` spawn `Error` exceptions, and
  `Errors` collects several of them. Each produces the
  `{"errors": [...]}` document with `error_document()`. Ready-made templates
  are `NOT_FOUND`, `INVALID_PARAMS` and `UNKNOWN_ERROR`.
- `papi.openapi` – an OpenAPI document model:
  - `papi.openapi.info`: `Info`, `Contact`, `License`, `Server`, `Tag`,
    `ParameterIn`, `SecurityRequirement`, `SecurityScheme`,
    `SecuritySchemeFlows`, `SecuritySchemeFlow`;
  - `papi.openapi.schema`: `Object`, `ObjectProperty`, `Array`, `Integer`,
    `Number`, `Boolean`, `Ref`, `Custom` and `encode_schema`;
  - `papi.openapi.context`: `EncoderContext`, which gathers tags and named
    references while encoding;
  - `papi.openapi.document`: `Document`, `Paths`, `Operation`, `Parameter`.
- Helpers: `papi.sizes.parse_bytes` (`"1.5GiB"` → `1610612736`),
  `papi.naming.parse_name` (`"FooBarBaz"` → `("Foo bar baz", "foo-bar-baz")`),
  `papi.iterate` (comma lists, struct-style tags, sorted mapping items),
  `papi.structs.equal_structs` (compares dataclass field types) and
  `papi.hasher` (structural XXH64 hashing with `Hasher`, `hash_value`,
  `xxh64`).

## Installation

```
pip install .
```

## Example

```python
from papi.openapi.info import Info, License, Server
from papi.openapi.document import Document, Operation
from papi.openapi.schema import Object, ObjectProperty, Integer

doc = Document(
    Info(title="Demo API", license=License(name="MIT")),
    Server(description="Local", url="http://localhost:3001"),
)

user = Object(
    title="User",
    required=["id"],
    properties=[ObjectProperty(name="id", schema=Integer(max=2**31 - 1))],
)

doc.add_operation("/users/{id}", Operation(id="get-user", method="GET",
                                           summary="Get user", response=user))

with open("openapi.json", "w") as fp:
    doc.write_json(fp)
```

Routing:

```python
from papi.router import Router

router = Router()
router.add("GET", "/users/{id}", lambda route: setattr(route, "handler", print))
handler, params = router.lookup("GET", "/users/42")
params.get("id")  # '42'
```

Errors:

```python
from papi.errors import FrozenError

too_short = FrozenError("TOO_SHORT", "Too short")
err = too_short.explained("name", "7")
err.error_document()
# {'errors': [{'code': 'TOO_SHORT', 'message': 'Too short',
#              'location': 'name', 'expect': '7'}]}
```

## What it does not do

The package holds the pieces of an API service, not the service itself. It
does not listen on a network address, parse HTTP requests, bind request
parameters or bodies to handler arguments, apply CORS headers, or stream
responses. There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```