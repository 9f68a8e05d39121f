"""Tests for JavaScript/TypeScript function and JSDoc extraction."""

from __future__ import annotations

import pytest

from scribe.jsdoc import extract_functions, parse_jsdoc, split_params


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("a, b", ("a", "b")),
        ("a = 1, ...rest", ("a", "rest")),
        ("{ id, name }, [first]", ("{…}", "[…]")),
        ("this: Window, map: Map<string, number>", ("map",)),
        ("fn = (x, y) => x, z", ("fn", "z")),
        ("", ()),
    ],
    ids=["plain", "default_and_rest", "destructured", "typed_this", "nested_commas", "empty"],
)
def test_split_params(text: str, expected: tuple[str, ...]) -> None:
    assert split_params(text) == expected


def test_parse_jsdoc_tags() -> None:
    block = parse_jsdoc(
        "/**\n"
        " * Resolve a module.\n"
        " *\n"
        " * Follows package exports.\n"
        " * @param {string} id - module id\n"
        " * @param {{ strict: boolean }} [options={}] lookup options\n"
        " * @return {string | null} the path\n"
        " */",
        line=4,
    )

    assert block.description == "Resolve a module.\n\nFollows package exports."
    assert block.line == 4
    assert [(t.name, t.type, t.optional) for t in block.params] == [
        ("id", "string", False),
        ("options", "{ strict: boolean }", True),
    ]
    assert block.params[0].description == "module id"
    assert block.has_returns


def test_extract_declarations_and_bindings() -> None:
    source = (
        "/** Sum. */\n"
        "export function sum(a, b) { return a + b; }\n"
        "const half = x => x / 2;\n"
        "export const log = function (message) { console.log(message); };\n"
        "export const noop = async () => {};\n"
        "const value = (1 + 2);\n"
    )

    functions = extract_functions(source)

    assert [(f.name, f.line, f.exported, f.params, f.returns_value) for f in functions] == [
        ("sum", 2, True, ("a", "b"), True),
        ("half", 3, False, ("x",), True),
        ("log", 4, True, ("message",), False),
        ("noop", 5, True, (), False),
    ]
    assert functions[0].jsdoc is not None
    assert functions[0].jsdoc.description == "Sum."
    assert functions[1].jsdoc is None


def test_overload_signatures_are_skipped() -> None:
    source = "export function pick(a: string): string;\nexport function pick(a: any) {\n  return a;\n}\n"

    functions = extract_functions(source)

    assert [(f.name, f.line) for f in functions] == [("pick", 2)]


def test_jsdoc_separated_by_code_is_not_attached() -> None:
    source = "/** Orphan. */\nconst x = 1;\nexport function run() {}\n"

    (function,) = extract_functions(source)

    assert function.jsdoc is None


def test_braces_in_strings_do_not_end_the_body() -> None:
    source = "export function render(name) {\n  const open = '}';\n  return `${name}`;\n}\n"

    (function,) = extract_functions(source)

    assert function.returns_value is True


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        (
            "export function point(a: number): { x: number } { return { x: a }; }\n",
            ("point", ("a",), True),
        ),
        (
            "export const point = (a: number): { x: number } => ({ x: a });\n",
            ("point", ("a",), True),
        ),
        (
            "export async function load(id: string): Promise<Map<string, { id: string }>> {\n  await fetch(id);\n}\n",
            ("load", ("id",), False),
        ),
        (
            "export const isText = (value: unknown): value is string => typeof value === 'string';\n",
            ("isText", ("value",), True),
        ),
        (
            "export function pair(a: string): [string, number] | null {\n  return null;\n}\n",
            ("pair", ("a",), True),
        ),
    ],
    ids=["declaration_object_type", "arrow_object_type", "nested_generics", "type_predicate", "tuple_union"],
)
def test_return_type_annotations_are_skipped(source: str, expected: tuple[str, tuple[str, ...], bool]) -> None:
    (function,) = extract_functions(source)

    assert (function.name, function.params, function.returns_value) == expected
    assert function.exported

