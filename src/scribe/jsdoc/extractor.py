"""Lightweight function and JSDoc extraction from JavaScript/TypeScript source."""

from __future__ import annotations

import re

from scribe.constants.jsdoc import (
    ARROW_AFTER_PARAMS_PATTERN,
    ARROW_FUNCTION_PATTERN,
    DESTRUCTURED_ARRAY,
    DESTRUCTURED_OBJECT,
    FUNCTION_DECLARATION_PATTERN,
    IDENTIFIER_PATTERN,
    JSDOC_BLOCK_PATTERN,
    JSDOC_PARAM_NAME_PATTERN,
    JSDOC_TAG_PATTERN,
    RETURN_VALUE_PATTERN,
    TAG_ALIASES,
    TYPE_PREFIX_KEYWORDS,
    TYPE_WORD_PATTERN,
)
from scribe.model import FunctionSignature, JsDocBlock, JsDocTag

_OPENERS = {"(": ")", "[": "]", "{": "}"}
_QUOTES = frozenset("'\"`")


def _skip_string(source: str, index: int) -> int:
    """Return the index just past the string literal starting at *index*."""
    quote = source[index]
    index += 1
    while index < len(source):
        char = source[index]
        if char == "\\":
            index += 2
            continue
        if char == quote:
            return index + 1
        index += 1
    return index


def _skip_comment(source: str, index: int) -> int:
    if source.startswith("//", index):
        end = source.find("\n", index)
        return len(source) if end == -1 else end
    end = source.find("*/", index + 2)
    return len(source) if end == -1 else end + 2


def find_closing(source: str, open_index: int) -> int | None:
    """Return the index of the bracket closing the one at *open_index*.

    String literals and comments are skipped; None means unbalanced.
    """
    stack = [_OPENERS[source[open_index]]]
    index = open_index + 1
    while index < len(source):
        char = source[index]
        if char in _QUOTES:
            index = _skip_string(source, index)
            continue
        if source.startswith("//", index) or source.startswith("/*", index):
            index = _skip_comment(source, index)
            continue
        if char in _OPENERS:
            stack.append(_OPENERS[char])
        elif char == stack[-1]:
            stack.pop()
            if not stack:
                return index
        index += 1
    return None


def split_params(text: str) -> tuple[str, ...]:
    """Split a parameter list on top-level commas and reduce each entry to its name."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for char in text:
        if char in "([{<":
            depth += 1
        elif char in ")]}>" and depth:
            depth -= 1
        if char == "," and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))

    names: list[str] = []
    for part in parts:
        part = part.strip()
        if part.startswith("..."):
            part = part[3:].lstrip()
        if not part:
            continue
        if part.startswith("{"):
            names.append(DESTRUCTURED_OBJECT)
            continue
        if part.startswith("["):
            names.append(DESTRUCTURED_ARRAY)
            continue
        match = IDENTIFIER_PATTERN.match(part)
        if match and match.group(0) != "this":
            names.append(match.group(0))
    return tuple(names)


def parse_jsdoc(block: str, line: int = 1) -> JsDocBlock:
    """Parse a ``/** ... */`` comment (delimiters optional) into description and tags."""
    text = block.strip()
    if text.startswith("/**"):
        text = text[3:]
    if text.endswith("*/"):
        text = text[:-2]

    description: list[str] = []
    raw_tags: list[list[str]] = []
    for raw in text.split("\n"):
        content = raw.strip()
        if content.startswith("*"):
            content = content[1:]
            if content.startswith(" "):
                content = content[1:]
        content = content.rstrip()
        if content.lstrip().startswith("@"):
            raw_tags.append([content.lstrip()])
        elif raw_tags:
            raw_tags[-1].append(content)
        else:
            description.append(content)

    tags = tuple(tag for tag in (_parse_tag("\n".join(lines).strip()) for lines in raw_tags) if tag is not None)
    return JsDocBlock(description="\n".join(description).strip(), tags=tags, line=line)


def _parse_tag(text: str) -> JsDocTag | None:
    match = JSDOC_TAG_PATTERN.match(text)
    if not match:
        return None
    tag = TAG_ALIASES.get(match.group("tag"), match.group("tag"))
    rest = match.group("rest").strip()

    type_text: str | None = None
    if rest.startswith("{"):
        close = find_closing(rest, 0)
        if close is not None:
            type_text = rest[1:close].strip() or None
            rest = rest[close + 1 :].strip()

    if tag != "param":
        return JsDocTag(tag=tag, type=type_text, description=rest)

    param = JSDOC_PARAM_NAME_PATTERN.match(rest)
    if not param:
        return JsDocTag(tag=tag, type=type_text, description=rest)
    optional = param.group("optional")
    return JsDocTag(
        tag=tag,
        type=type_text,
        name=optional or param.group("name"),
        optional=optional is not None,
        description=param.group("description").strip(),
    )


def _line_of(source: str, index: int) -> int:
    return source.count("\n", 0, index) + 1


def _preceding_jsdoc(source: str, start: int, blocks: list[re.Match[str]]) -> JsDocBlock | None:
    """Return the JSDoc block separated from *start* by whitespace only."""
    for block in reversed(blocks):
        if block.end() > start:
            continue
        if source[block.end() : start].strip():
            return None
        return parse_jsdoc(block.group(0), _line_of(source, block.start()))
    return None


def _skip_angle(source: str, index: int) -> int:
    """Return the index just past the ``<...>`` type arguments starting at *index*."""
    depth = 0
    while index < len(source):
        char = source[index]
        if char in _QUOTES:
            index = _skip_string(source, index)
            continue
        if char in _OPENERS:
            close = find_closing(source, index)
            if close is None:
                return len(source)
            index = close + 1
            continue
        if char == "<":
            depth += 1
        elif char == ">" and source[index - 1] != "=":
            depth -= 1
            if not depth:
                return index + 1
        elif char == ";" and not depth:
            return index
        index += 1
    return index


def _skip_return_type(source: str, index: int) -> int:
    """Skip a ``: Type`` annotation after a parameter list.

    Returns the index of the body ``{``, the ``=>`` or the ``;`` that ends the
    annotation, or *index* unchanged when no annotation follows.
    """
    start = index
    while index < len(source) and source[index].isspace():
        index += 1
    if not source.startswith(":", index):
        return start
    index += 1
    expect_type = True
    while index < len(source):
        char = source[index]
        if char.isspace():
            index += 1
        elif source.startswith("=>", index):
            if not expect_type:
                return index
            index += 2
        elif char in _OPENERS:
            if char == "{" and not expect_type:
                return index
            close = find_closing(source, index)
            if close is None:
                return len(source)
            index = close + 1
            expect_type = False
        elif char == "<":
            index = _skip_angle(source, index)
            expect_type = False
        elif char in _QUOTES:
            index = _skip_string(source, index)
            expect_type = False
        elif char in ";=":
            return index
        elif char in "|&?:,.":
            index += 1
            expect_type = True
        else:
            word = TYPE_WORD_PATTERN.match(source, index)
            if word is None:
                index += 1
                continue
            index = word.end()
            expect_type = word.group(0) in TYPE_PREFIX_KEYWORDS
    return index


def _body_returns(source: str, after_params: int) -> bool | None:
    """Inspect the body following a parameter list; None when there is no body."""
    index = _skip_return_type(source, after_params)
    while index < len(source):
        char = source[index]
        if char == "{":
            close = find_closing(source, index)
            body = source[index + 1 : close] if close is not None else source[index + 1 :]
            return bool(RETURN_VALUE_PATTERN.search(body))
        if char == ";":
            return None
        index += 1
    return None


def _arrow_returns(source: str, after_arrow: int) -> bool:
    rest = source[after_arrow:].lstrip()
    if rest.startswith("{"):
        return bool(_body_returns(source, len(source) - len(rest)))
    return True


def extract_functions(source: str) -> list[FunctionSignature]:
    """Find function declarations and function-valued bindings in *source*."""
    blocks = list(JSDOC_BLOCK_PATTERN.finditer(source))
    found: list[FunctionSignature] = []

    for match in FUNCTION_DECLARATION_PATTERN.finditer(source):
        open_paren = match.end() - 1
        close_paren = find_closing(source, open_paren)
        if close_paren is None:
            continue
        returns = _body_returns(source, close_paren + 1)
        if returns is None:
            continue
        found.append(
            FunctionSignature(
                name=match.group("name"),
                line=_line_of(source, match.start("name")),
                exported=bool(match.group("export")),
                params=split_params(source[open_paren + 1 : close_paren]),
                returns_value=returns,
                jsdoc=_preceding_jsdoc(source, match.start(), blocks),
            )
        )

    for match in ARROW_FUNCTION_PATTERN.finditer(source):
        if match.group("bare"):
            params: tuple[str, ...] = (match.group("bare"),)
            returns = _arrow_returns(source, match.end())
        else:
            open_paren = match.end() - 1
            close_paren = find_closing(source, open_paren)
            if close_paren is None:
                continue
            params = split_params(source[open_paren + 1 : close_paren])
            if match.group("function"):
                body_returns = _body_returns(source, close_paren + 1)
                if body_returns is None:
                    continue
                returns = body_returns
            else:
                arrow = ARROW_AFTER_PARAMS_PATTERN.match(source, _skip_return_type(source, close_paren + 1))
                if not arrow:
                    continue
                returns = _arrow_returns(source, arrow.end())
        found.append(
            FunctionSignature(
                name=match.group("name"),
                line=_line_of(source, match.start("name")),
                exported=bool(match.group("export")),
                params=params,
                returns_value=returns,
                jsdoc=_preceding_jsdoc(source, match.start(), blocks),
            )
        )

    found.sort(key=lambda signature: signature.line)
    return found
