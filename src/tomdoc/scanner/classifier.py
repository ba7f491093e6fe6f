import re
from dataclasses import dataclass
from re import Match, Pattern
from typing import Callable, List, Optional

from tomdoc.spec import Declaration, DeclarationKind

# Shell function names may contain ':' (e.g. "lib::helper").
FUNC_NAME_RE = r"[a-zA-Z_][a-zA-Z0-9_:]*"

# Variables are far more restrictive than functions.
VAR_NAME_RE = r"[A-Z_a-z][0-9A-Z_a-z]*"


@dataclass(frozen=True)
class DeclarationRule:
    kind: DeclarationKind
    pattern: Pattern[str]
    extract: Callable[[Match[str]], str]

    def apply(self, line: str) -> Optional[Declaration]:
        match = self.pattern.match(line)
        if not match:
            return None
        return Declaration(kind=self.kind, display_name=self.extract(match))


def _callable(match: Match[str]) -> str:
    return f"{match.group('name')}()"


def _variable(match: Match[str]) -> str:
    return match.group("name")


def _readonly(match: Match[str]) -> str:
    return f"const {match.group('name')}{match.group('rest')}"


# Order matters: the first rule that matches a line wins.
DEFAULT_RULES: List[DeclarationRule] = [
    # foo() { ... }
    DeclarationRule(
        DeclarationKind.CALLABLE,
        re.compile(rf"^\s*(?P<name>{FUNC_NAME_RE})\s*\(\)"),
        _callable,
    ),
    # function foo { ... }
    DeclarationRule(
        DeclarationKind.CALLABLE,
        re.compile(rf"^\s*function\s+(?P<name>{FUNC_NAME_RE})"),
        _callable,
    ),
    # export FOO=bar / export FOO
    DeclarationRule(
        DeclarationKind.VARIABLE,
        re.compile(rf"^\s*export\s+(?P<name>{VAR_NAME_RE})"),
        _variable,
    ),
    # FOO=bar
    DeclarationRule(
        DeclarationKind.VARIABLE,
        re.compile(rf"^\s*(?P<name>{VAR_NAME_RE})="),
        _variable,
    ),
    # declare -a FOO=(...) / typeset FOO
    DeclarationRule(
        DeclarationKind.VARIABLE,
        re.compile(
            rf"^\s*(?:declare|typeset)\s+(?:-[a-zA-Z]*\s+)?(?P<name>{VAR_NAME_RE})"
        ),
        _variable,
    ),
    # readonly FOO=bar
    DeclarationRule(
        DeclarationKind.VARIABLE,
        re.compile(rf"^\s*readonly\s+(?P<name>{VAR_NAME_RE})(?P<rest>=?.*)$"),
        _readonly,
    ),
    # : ${FOO:=default}
    DeclarationRule(
        DeclarationKind.VARIABLE,
        re.compile(rf"^\s*:\s+\$\{{(?P<name>{VAR_NAME_RE}):?="),
        _variable,
    ),
]


class DeclarationClassifier:
    def __init__(self, rules: Optional[List[DeclarationRule]] = None):
        self.rules = rules if rules is not None else DEFAULT_RULES

    def classify(self, line: str) -> Optional[Declaration]:
        for rule in self.rules:
            declaration = rule.apply(line)
            if declaration is not None:
                return declaration
        return None


_default_classifier = DeclarationClassifier()


def classify(line: str) -> Optional[Declaration]:
    return _default_classifier.classify(line)
