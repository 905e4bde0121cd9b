"""
Selector structure parser.

Turns a single selector string into a chain of compound selectors
using the tinycss2 tokenizer.
"""

from dataclasses import dataclass, field
from typing import List, Optional

import tinycss2


COMBINATORS = {'>', '+', '~'}
ATTRIBUTE_OPERATORS = {'=', '~=', '|=', '^=', '$=', '*='}


class SelectorSyntaxError(ValueError):
    """Raised when a selector string cannot be parsed."""

    def __init__(self, selector: str, reason: str):
        super().__init__(f"Invalid selector {selector!r}: {reason}")
        self.selector = selector
        self.reason = reason


@dataclass
class AttributeSelector:
    """An attribute test such as ``[href^="http"]``."""
    name: str
    operator: Optional[str] = None
    value: Optional[str] = None
    flags: Optional[str] = None


@dataclass
class CompoundSelector:
    """
    One position in a selector chain, e.g. ``a.external[href]``.

    ``combinator`` joins this compound to the previous one in the chain
    (" " for descendant) and is None for the first compound.
    """
    tag_name: Optional[str] = None
    id: Optional[str] = None
    class_names: List[str] = field(default_factory=list)
    attrs: List[AttributeSelector] = field(default_factory=list)
    pseudos: List[str] = field(default_factory=list)
    combinator: Optional[str] = None

    def is_empty(self) -> bool:
        return not (
            self.tag_name or self.id or self.class_names
            or self.attrs or self.pseudos
        )


def parse_selector(selector: str) -> List[CompoundSelector]:
    """
    Parse a selector into its compound selectors.

    Args:
        selector: A single (comma-free) selector, e.g. "ul > li.item:hover"

    Returns:
        Compound selectors in document order

    Raises:
        SelectorSyntaxError: If the selector is empty or malformed
    """
    tokens = tinycss2.parse_component_value_list(selector, skip_comments=True)
    parser = _ChainParser(selector, tokens)
    return parser.parse()


class _ChainParser:
    """Single pass over the selector tokens."""

    def __init__(self, selector: str, tokens: list):
        self.selector = selector
        self.tokens = tokens
        self.pos = 0

    def fail(self, reason: str) -> SelectorSyntaxError:
        return SelectorSyntaxError(self.selector, reason)

    def next_token(self):
        if self.pos >= len(self.tokens):
            return None
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def parse(self) -> List[CompoundSelector]:
        chain: List[CompoundSelector] = []
        current = CompoundSelector()
        combinator = None

        while True:
            token = self.next_token()
            if token is None:
                break

            if token.type == 'whitespace':
                if not current.is_empty():
                    chain.append(current)
                    current = CompoundSelector()
                    combinator = ' '
                continue

            if token.type == 'literal' and token.value in COMBINATORS:
                if not current.is_empty():
                    chain.append(current)
                    current = CompoundSelector()
                elif not chain:
                    raise self.fail(f"unexpected combinator {token.value!r}")
                elif combinator in COMBINATORS:
                    raise self.fail("consecutive combinators")
                combinator = token.value
                continue

            if current.is_empty():
                current.combinator = combinator if chain else None
            self.parse_simple(token, current)

        if current.is_empty():
            if not chain:
                raise self.fail("empty selector")
            if combinator in COMBINATORS:
                raise self.fail(f"dangling combinator {combinator!r}")
        else:
            chain.append(current)

        return chain

    def parse_simple(self, token, current: CompoundSelector) -> None:
        if token.type == 'ident' or (token.type == 'literal' and token.value in ('*', '|')):
            self.parse_type(token, current)
        elif token.type == 'hash':
            if not token.is_identifier:
                raise self.fail(f"invalid id #{token.value}")
            if current.id is None:
                current.id = token.value
        elif token.type == 'literal' and token.value == '.':
            name = self.next_token()
            if name is None or name.type != 'ident':
                raise self.fail("expected a class name after '.'")
            current.class_names.append(name.value)
        elif token.type == '[] block':
            current.attrs.append(self.parse_attribute(token))
        elif token.type == 'literal' and token.value == ':':
            current.pseudos.append(self.parse_pseudo())
        elif token.type == 'literal' and token.value == ',':
            raise self.fail("selector lists must be split before parsing")
        else:
            raise self.fail(f"unexpected {tinycss2.serialize([token])!r}")

    def parse_type(self, token, current: CompoundSelector) -> None:
        if not current.is_empty():
            raise self.fail("type selector must start a compound selector")

        name = '' if token.value == '|' else token.value
        # namespace prefix: ns|tag, *|tag or |tag
        if token.value == '|' or self.peek_literal('|'):
            if token.value != '|':
                self.pos += 1
            local = self.next_token()
            if local is None or not (
                local.type == 'ident' or (local.type == 'literal' and local.value == '*')
            ):
                raise self.fail("expected an element name after '|'")
            name = local.value
        current.tag_name = name

    def peek_literal(self, value: str) -> bool:
        if self.pos >= len(self.tokens):
            return False
        token = self.tokens[self.pos]
        return token.type == 'literal' and token.value == value

    def parse_attribute(self, block) -> AttributeSelector:
        parts = [t for t in block.content if t.type not in ('whitespace', 'comment')]
        # Namespace prefix: ns|name, *|name or |name
        if (len(parts) >= 2 and parts[1].type == 'literal' and parts[1].value == '|'
                and (parts[0].type == 'ident' or (parts[0].type == 'literal' and parts[0].value == '*'))):
            del parts[:2]
        elif parts and parts[0].type == 'literal' and parts[0].value == '|':
            del parts[:1]
        if not parts or parts[0].type != 'ident':
            raise self.fail("attribute selector needs a name")

        attribute = AttributeSelector(name=parts[0].value)
        rest = parts[1:]
        if not rest:
            return attribute

        operator = ''
        while rest and rest[0].type == 'literal':
            operator += rest.pop(0).value
            if operator.endswith('='):
                break
        if operator not in ATTRIBUTE_OPERATORS:
            raise self.fail(f"unknown attribute operator {operator!r}")
        if not rest or rest[0].type not in ('ident', 'string'):
            raise self.fail("attribute operator needs a value")
        attribute.operator = operator
        attribute.value = rest.pop(0).value

        if rest:
            flag = rest.pop(0)
            if flag.type != 'ident' or flag.lower_value not in ('i', 's') or rest:
                raise self.fail("unexpected tokens in attribute selector")
            attribute.flags = flag.lower_value
        return attribute

    def parse_pseudo(self) -> str:
        prefix = ':'
        token = self.next_token()
        if token is not None and token.type == 'literal' and token.value == ':':
            prefix = '::'
            token = self.next_token()

        if token is None:
            raise self.fail("expected a pseudo-class name")
        if token.type == 'ident':
            return prefix + token.lower_value
        if token.type == 'function':
            arguments = tinycss2.serialize(token.arguments).strip()
            return f"{prefix}{token.lower_name}({arguments})"
        raise self.fail("expected a pseudo-class name")
