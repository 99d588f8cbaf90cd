"""
TypeScript syntax-tree detectors

Walks tree-sitter trees to find configuration usage:
- service accessors: etcd.get("KEY"), config.getOrThrow("KEY")
- accessors on inline function parameters: (cfg) => cfg.get("KEY")
- environment reads: process.env.KEY

Matching is purely textual on callee and object expressions; no type or
data-flow resolution is attempted.
"""

import logging
from typing import Iterator, Optional

from tree_sitter import Node

from config_scanner.core.project import SourceFile
from config_scanner.core.scanner.models import ScanConfig, UsageReport, env_key

logger = logging.getLogger(__name__)

INLINE_FUNCTION_TYPES = frozenset({
    "arrow_function",
    "function_expression",
    "function",  # tree-sitter-typescript < 0.21
    "generator_function",
})

PARAMETER_TYPES = frozenset({"required_parameter", "optional_parameter"})

# `typeof a.b` in type position names an entity, it does not read a property
TYPE_QUERY_TYPES = frozenset({"type_query"})

MAX_CODE_POINT = 0x10FFFF

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
}


# ============================================================
# Node helpers
# ============================================================

def node_text(source_file: SourceFile, node: Node) -> str:
    """Source text covered by `node`."""
    return source_file.source[node.start_byte:node.end_byte].decode("utf-8")


def iter_descendants(node: Node, prune: frozenset[str] = frozenset()) -> Iterator[Node]:
    """
    Depth-first, pre-order walk over the named descendants of `node`

    Subtrees rooted at a node whose type is in `prune` are not entered.
    """
    stack = list(reversed(node.named_children))
    while stack:
        current = stack.pop()
        if current.type in prune:
            continue
        yield current
        stack.extend(reversed(current.named_children))


def is_call_expression(node: Node) -> bool:
    # Tagged templates share the node type but take a template, not arguments
    if node.type != "call_expression":
        return False
    args = node.child_by_field_name("arguments")
    return args is not None and args.type == "arguments"


def is_inline_function(node: Node) -> bool:
    return node.type in INLINE_FUNCTION_TYPES


def is_property_access(node: Node) -> bool:
    return node.type == "member_expression"


def is_string_literal(node: Node) -> bool:
    return node.type == "string"


def _decode_escape(sequence: str) -> str:
    body = sequence[1:]
    if not body or body[0] in "\r\n\u2028\u2029":
        return ""
    if body in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[body]
    if body[0] in "01234567":
        return chr(int(body, 8))
    if body.startswith("x") and len(body) == 3:
        return chr(int(body[1:], 16))
    if body.startswith("u{"):
        code_point = int(body[2:-1], 16)
        if code_point > MAX_CODE_POINT:
            return sequence
        return chr(code_point)
    if body.startswith("u") and len(body) == 5:
        return chr(int(body[1:], 16))
    return body


def string_literal_value(source_file: SourceFile, node: Node) -> str:
    """Decoded value of a quoted string literal."""
    parts = []
    for child in node.named_children:
        text = node_text(source_file, child)
        if child.type == "escape_sequence":
            parts.append(_decode_escape(text))
        else:
            parts.append(text)
    value = "".join(parts)
    # Recombine surrogate pairs written as two \u escapes
    return value.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


def callee_text(source_file: SourceFile, call: Node) -> str:
    """Text of the called expression, e.g. `this.config.get`."""
    function = call.child_by_field_name("function")
    return node_text(source_file, function) if function is not None else ""


def string_arguments(source_file: SourceFile, call: Node) -> list[str]:
    """Values of every string-literal argument; other arguments are skipped."""
    args = call.child_by_field_name("arguments")
    if args is None:
        return []
    return [
        string_literal_value(source_file, arg)
        for arg in args.named_children
        if is_string_literal(arg)
    ]


def _function_parameters(function: Node) -> list[Node]:
    single = function.child_by_field_name("parameter")
    if single is not None:
        return [single]
    params = function.child_by_field_name("parameters")
    if params is None:
        return []
    return [child for child in params.named_children if child.type in PARAMETER_TYPES]


def parameter_name(source_file: SourceFile, param: Node) -> Optional[str]:
    """
    Name of a declared parameter

    Identifiers and `this` yield their text, rest parameters their inner
    name, destructuring patterns their raw pattern text.
    """
    if param.type not in PARAMETER_TYPES:
        return node_text(source_file, param)
    pattern = param.child_by_field_name("pattern")
    if pattern is None:
        pattern = next(
            (c for c in param.named_children if c.type in ("identifier", "this")),
            None,
        )
    if pattern is None:
        return None
    if pattern.type == "rest_pattern" and pattern.named_children:
        pattern = pattern.named_children[0]
    return node_text(source_file, pattern)


# ============================================================
# Import filter
# ============================================================

def is_import_declaration(node: Node) -> bool:
    # `import X = require(...)` is an import-equals declaration, not an import
    if node.type != "import_statement":
        return False
    return not any(child.type == "import_require_clause" for child in node.named_children)


def uses_service(source_file: SourceFile, config: ScanConfig | None = None) -> bool:
    """
    Whether any import statement mentions a recognized service type

    Substring match on the statement text: aliases still match, and so does
    any identifier that merely contains a service name.
    """
    config = config or ScanConfig()
    for statement in source_file.tree.root_node.named_children:
        if not is_import_declaration(statement):
            continue
        text = node_text(source_file, statement)
        if any(service in text for service in config.service_types):
            return True
    return False


# ============================================================
# Detectors
# ============================================================

class CallSiteDetector:
    """Finds accessor calls on configuration services."""

    def __init__(self, report: UsageReport, config: ScanConfig | None = None):
        self.report = report
        self.config = config or ScanConfig()

    def scan_file(self, source_file: SourceFile) -> None:
        calls: list[tuple[str, Node]] = []
        functions: list[Node] = []
        for node in iter_descendants(source_file.tree.root_node):
            if is_call_expression(node):
                text = callee_text(source_file, node)
                calls.append((text, node))
                self.check_service_call(source_file, node, text)
            if is_inline_function(node):
                functions.append(node)

        for function in functions:
            self._scan_function_parameters(source_file, function, calls)

    def check_service_call(self, source_file: SourceFile, call: Node, text: Optional[str] = None) -> None:
        if text is None:
            text = callee_text(source_file, call)
        if any(excluded in text for excluded in self.config.excluded_callee_substrings):
            return
        if text.endswith(self.config.accessor_suffixes()):
            self._add_to_report(source_file, call)

    def _scan_function_parameters(
        self,
        source_file: SourceFile,
        function: Node,
        calls: list[tuple[str, Node]],
    ) -> None:
        for param in _function_parameters(function):
            name = parameter_name(source_file, param)
            if name:
                self._scan_file_for_parameter_usage(source_file, name, calls)

    def _scan_file_for_parameter_usage(
        self,
        source_file: SourceFile,
        param_name: str,
        calls: list[tuple[str, Node]],
    ) -> None:
        # File-wide on purpose: usage is not scoped to the function body
        targets = self.config.parameter_callees(param_name)
        for text, call in calls:
            if text in targets:
                self._add_to_report(source_file, call)

    def _add_to_report(self, source_file: SourceFile, call: Node) -> None:
        for value in string_arguments(source_file, call):
            logger.debug(f"{source_file.path}:{call.start_point[0] + 1} config key {value!r}")
            self.report.add(value)


class EnvReadDetector:
    """Finds property reads on the global environment object."""

    def __init__(self, report: UsageReport, config: ScanConfig | None = None):
        self.report = report
        self.config = config or ScanConfig()

    def scan_for_process_env(self, source_file: SourceFile) -> None:
        for node in iter_descendants(source_file.tree.root_node, prune=TYPE_QUERY_TYPES):
            if not is_property_access(node):
                continue
            obj = node.child_by_field_name("object")
            prop = node.child_by_field_name("property")
            if obj is None or prop is None:
                continue
            if node_text(source_file, obj) == self.config.env_var_root:
                name = node_text(source_file, prop)
                logger.debug(f"{source_file.path}:{node.start_point[0] + 1} env var {name!r}")
                self.report.add(env_key(name, self.config.env_var_root))
