"""Navigation Example - Reading JSON In Place.

Demonstrates walking a JSON document without building any Python objects
for the parts you do not read:

1. Look up a key and step to an array element
2. Decode numbers and strings on demand
3. Follow a whole path with resolve()
4. Decode a long string through a small fixed buffer

Python 3.13+.
"""

from __future__ import annotations

DOCUMENT = b"""{
  "service": "inventory",
  "replicas": [
    {"host": "db-1", "port": 5432, "primary": true},
    {"host": "db-2", "port": 5433, "primary": false}
  ],
  "motd": "Maintenance window:\\tSunday 02:00-04:00 UTC\\/CET"
}"""


def example_1_lookup_and_index() -> None:
    """Find a member, then skip to an element of its array."""
    from jsonwalk import Cursor
    from jsonwalk.syntax import index, lookup
    from jsonwalk.syntax.parser.primitives import number
    from jsonwalk.syntax.parser.whitespace import begin_array, begin_object

    print("=" * 60)
    print("Example 1: lookup() and index()")
    print("=" * 60)

    body = begin_object(Cursor(DOCUMENT, 0))
    replicas = lookup("replicas", body)
    second = index(1, begin_array(replicas))
    port = lookup("port", begin_object(second))

    parsed = number(port)
    if parsed is not None:
        print(f"Second replica port: {parsed.value:.0f}")
    print()


def example_2_decode_on_demand() -> None:
    """Decode only the scalars you ask for."""
    from jsonwalk import Cursor
    from jsonwalk.syntax import decode_string, index, lookup
    from jsonwalk.syntax.parser.rules import boolean
    from jsonwalk.syntax.parser.whitespace import begin_array, begin_object

    print("=" * 60)
    print("Example 2: Decoding On Demand")
    print("=" * 60)

    body = begin_object(Cursor(DOCUMENT, 0))
    service = decode_string(lookup("service", body))
    if service is not None:
        print(f"Service: {service.value.decode('ascii')}")

    first_replica = index(0, begin_array(lookup("replicas", body)))
    primary = boolean(lookup("primary", begin_object(first_replica)))
    if primary is not None:
        print(f"First replica is primary: {primary.value}")
    print()


def example_3_resolve() -> None:
    """Follow keys and indices in one call."""
    from jsonwalk import Cursor
    from jsonwalk.syntax import decode_string, resolve

    print("=" * 60)
    print("Example 3: resolve()")
    print("=" * 60)

    for path in (["replicas", 0, "host"], ["replicas", 1, "host"], ["replicas", 2, "host"]):
        host = decode_string(resolve(Cursor(DOCUMENT, 0), path))
        shown = host.value.decode("ascii") if host is not None else "<missing>"
        print(f"{path!s:30} -> {shown}")
    print()


def example_4_bounded_unescape() -> None:
    """Decode a string in chunks through a fixed-size buffer."""
    from jsonwalk import Cursor
    from jsonwalk.syntax import resolve, unescape
    from jsonwalk.syntax.parser.whitespace import begin_string

    print("=" * 60)
    print("Example 4: Bounded unescape()")
    print("=" * 60)

    cursor = begin_string(resolve(Cursor(DOCUMENT, 0), ["motd"]))
    buffer = bytearray(9)
    chunks = []
    while cursor is not None:
        rest = unescape(buffer, cursor)
        if rest == cursor:
            break
        chunks.append(bytes(buffer[: buffer.index(0)]))
        cursor = rest
    print(" | ".join(chunk.decode("ascii") for chunk in chunks))
    print()


def main() -> None:
    """Run all navigation examples."""
    print()
    print("jsonwalk Navigation Examples")
    print()

    example_1_lookup_and_index()
    example_2_decode_on_demand()
    example_3_resolve()
    example_4_bounded_unescape()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
