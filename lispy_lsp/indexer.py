from __future__ import annotations

"""
Lightweight indexer for lispy source without evaluating code.

We scan the token stream for:
- bindings: (let name ...) and the parameters of (lambda (a b) ...)
- paren structure: every unmatched '(' and every stray ')', with positions

The scan is tolerant of partial buffers so the language server can index a
document while it is being typed.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from lispy.reader.parser import Token, lex


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "param"
    line: int
    col: int


@dataclass
class Problem:
    message: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    problems: List[Problem] = field(default_factory=list)
    paren_balance: int = 0


def position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def _record(idx: DocumentIndex, text: str, name: str, kind: str, offset: Optional[int]) -> None:
    line, col = position_from_offset(text, offset or 0)
    # First definition wins so hover points at the outermost binding.
    idx.symbols.setdefault(name, SymbolDef(name=name, kind=kind, line=line, col=col))


def _index_lambda_params(idx: DocumentIndex, text: str, tokens: List[Token], start: int) -> None:
    # tokens[start] is the '(' opening the parameter list
    if start >= len(tokens) or tokens[start].value != "(":
        return
    j = start + 1
    while j < len(tokens) and tokens[j].value not in ("(", ")"):
        _record(idx, text, tokens[j].value, "param", tokens[j].offset)
        j += 1


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    tokens = list(lex(text))
    open_stack: List[Token] = []

    for i, tok in enumerate(tokens):
        if tok.value == "(":
            open_stack.append(tok)
            head = tokens[i + 1].value if i + 1 < len(tokens) else None
            if head == "let" and i + 2 < len(tokens):
                name_tok = tokens[i + 2]
                if name_tok.value not in ("(", ")"):
                    _record(idx, text, name_tok.value, "var", name_tok.offset)
            elif head == "lambda":
                _index_lambda_params(idx, text, tokens, i + 2)
        elif tok.value == ")":
            if open_stack:
                open_stack.pop()
            else:
                line, col = position_from_offset(text, tok.offset or 0)
                idx.problems.append(Problem("Unexpected ')'", line, col))

    for tok in open_stack:
        line, col = position_from_offset(text, tok.offset or 0)
        idx.problems.append(Problem("Unmatched '('", line, col))

    idx.paren_balance = len(open_stack)
    return idx


def word_at(text: str, line: int, character: int) -> Optional[str]:
    """Return the token under the cursor, or None between tokens."""
    lines = text.splitlines(True)
    if line >= len(lines):
        return None
    current = lines[line]
    start = character
    while start > 0 and not current[start - 1].isspace() and current[start - 1] not in "()":
        start -= 1
    end = character
    while end < len(current) and not current[end].isspace() and current[end] not in "()":
        end += 1
    word = current[start:end]
    return word or None


def callee_before(prefix: str) -> Optional[str]:
    """Name of the operator of the innermost open application in `prefix`."""
    lp = prefix.rfind("(")
    if lp == -1:
        return None
    parts = prefix[lp + 1:].split()
    return parts[0] if parts else None
