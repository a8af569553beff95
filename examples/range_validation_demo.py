# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Range Validation Demo: inclusive vs exclusive upper bounds.

Shows the boundary behaviour of ``maximum`` / ``exclusiveMaximum``, how
malformed schemas are rejected at load time, and a conformance run over the
bundled fixture.

Run with:
    python examples/range_validation_demo.py
"""

from schemabound import ConfigurationError, load_builtin_fixture, run_groups, validate


def demo_boundaries():
    print("\n" + "=" * 70)
    print("DEMO 1: Boundary behaviour")
    print("=" * 70)

    inclusive = {"maximum": 3.0}
    exclusive = {"maximum": 3.0, "exclusiveMaximum": True}

    for value in (2.6, 3.0, 3.5, "x"):
        print(
            f"  {value!r:>6}  inclusive={validate(inclusive, value)!s:<5}  "
            f"exclusive={validate(exclusive, value)}"
        )


def demo_malformed_schema():
    print("\n" + "=" * 70)
    print("DEMO 2: Malformed schemas fail fast")
    print("=" * 70)

    for schema in ({"maximum": "3"}, {"maximun": 3}, {"exclusiveMaximum": True}):
        try:
            validate(schema, 1)
            print(f"  {schema}: accepted (unexpected)")
        except ConfigurationError as e:
            print(f"  {schema}: rejected -> {e}")


def demo_conformance_run():
    print("\n" + "=" * 70)
    print("DEMO 3: Conformance run over the bundled fixture")
    print("=" * 70)

    report = run_groups(load_builtin_fixture("maximum").groups)
    print("  " + report.format().replace("\n", "\n  "))


if __name__ == "__main__":
    demo_boundaries()
    demo_malformed_schema()
    demo_conformance_run()
