"""Find annotations in Python source files.

Source files are parsed, never imported. Decorators of classes, methods and
functions, as well as module level calls, are annotations when their callee
resolves to a class in one of the whitelisted namespaces.
"""

import ast
import importlib
import logging
from pathlib import Path
from typing import Any, Iterable

from route2swagger.annotation import next_handle
from route2swagger.context import Context
from route2swagger.errors import AnnotationError
from route2swagger.swagger.analysis import Analysis
from route2swagger.swagger.annotations import Swagger

logger = logging.getLogger(__name__)


def _collect_imports(tree: ast.Module) -> dict[str, str]:
    """Map local names to the dotted path they were imported from."""
    imports: dict[str, str] = {}
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                if alias.asname:
                    imports[alias.asname] = alias.name
                else:
                    head = alias.name.split(".")[0]
                    imports[head] = head
        elif isinstance(node, ast.ImportFrom) and node.module and not node.level:
            for alias in node.names:
                imports[alias.asname or alias.name] = f"{node.module}.{alias.name}"
    return imports


def _dotted_name(node: ast.expr) -> str | None:
    if isinstance(node, ast.Name):
        return node.id
    if isinstance(node, ast.Attribute):
        value = _dotted_name(node.value)
        return f"{value}.{node.attr}" if value else None
    return None


def _module_name(file_path: Path, root: Path) -> str:
    try:
        parts = list(file_path.relative_to(root).with_suffix("").parts)
    except ValueError:
        parts = [file_path.stem]
    if parts and parts[-1] == "__init__":
        parts.pop()
    return ".".join(parts)


class Scanner:
    """Walks source files and feeds their annotations into an analysis."""

    def __init__(self, namespaces: Iterable[str]):
        self.namespaces = tuple(dict.fromkeys(namespaces))

    def scan(self, path: Path, analysis: Analysis) -> Analysis:
        if path.is_file():
            files, root = [path], path.parent
        else:
            files, root = sorted(path.rglob("*.py")), path
        for file_path in files:
            self.scan_file(file_path, analysis, root)
        return analysis

    def scan_file(self, file_path: Path, analysis: Analysis, root: Path | None = None) -> None:
        logger.info("Scanning %s", file_path)
        try:
            tree = ast.parse(file_path.read_text(encoding="utf-8"), filename=str(file_path))
        except SyntaxError as e:
            logger.warning("Skipping %s: %s (line %s)", file_path, e.msg, e.lineno)
            return
        except ValueError as e:
            # undecodable bytes or null bytes in the source
            logger.warning("Skipping %s: %s", file_path, e)
            return

        imports = _collect_imports(tree)
        base = Context(filename=str(file_path), module=_module_name(file_path, root or file_path.parent))

        for node in tree.body:
            if isinstance(node, ast.Expr) and isinstance(node.value, ast.Call):
                context = base.model_copy(update={"line": node.lineno})
                self._add(node.value, context, imports, analysis)
            elif isinstance(node, ast.ClassDef):
                class_context = base.model_copy(update={"class_name": node.name, "line": node.lineno})
                for decorator in node.decorator_list:
                    self._add(decorator, class_context, imports, analysis)
                for item in node.body:
                    if isinstance(item, (ast.FunctionDef, ast.AsyncFunctionDef)):
                        context = class_context.model_copy(update={"method": item.name, "line": item.lineno})
                        for decorator in item.decorator_list:
                            self._add(decorator, context, imports, analysis)
            elif isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)):
                context = base.model_copy(update={"method": node.name, "line": node.lineno})
                for decorator in node.decorator_list:
                    self._add(decorator, context, imports, analysis)

    def _add(self, node: ast.expr, context: Context, imports: dict[str, str], analysis: Analysis) -> None:
        callee = node.func if isinstance(node, ast.Call) else node
        if self._qualified_name(callee, imports) is None:
            return
        try:
            annotation = self._evaluate(node, imports)
        except AnnotationError as e:
            logger.warning("%s in %s", e, context)
            return
        analysis.add_annotation(annotation, context, handle=next_handle())

    def _qualified_name(self, node: ast.expr, imports: dict[str, str]) -> str | None:
        """Resolve ``node`` to a whitelisted dotted name, or None."""
        name = _dotted_name(node)
        if name is None:
            return None
        head, _, rest = name.partition(".")
        qualified = imports.get(head, head) + (f".{rest}" if rest else "")
        module = qualified.rpartition(".")[0]
        if any(module == ns or module.startswith(f"{ns}.") for ns in self.namespaces):
            return qualified
        return None

    def _annotation_class(self, node: ast.expr, imports: dict[str, str]) -> Any:
        qualified = self._qualified_name(node, imports)
        if qualified is None:
            return None
        module_name, _, class_name = qualified.rpartition(".")
        try:
            module = importlib.import_module(module_name)
            return getattr(module, class_name)
        except (ImportError, AttributeError) as e:
            raise AnnotationError(f"Unknown annotation {qualified}: {e}") from e

    def _instantiate(self, target: Any, node: ast.expr, args: list[Any], kwargs: dict[str, Any]) -> Any:
        try:
            return target(*args, **kwargs)
        except (TypeError, ValueError) as e:
            raise AnnotationError(f"Invalid annotation {ast.unparse(node)}: {e}") from e

    def _evaluate(self, node: ast.expr, imports: dict[str, str]) -> Any:
        if isinstance(node, ast.Call):
            target = self._annotation_class(node.func, imports)
            if target is None:
                raise AnnotationError(f"Unsupported expression {ast.unparse(node)}")
            args = [self._evaluate(arg, imports) for arg in node.args]
            kwargs = {}
            for keyword in node.keywords:
                if keyword.arg is None:
                    raise AnnotationError(f"Unsupported keyword unpacking in {ast.unparse(node)}")
                kwargs[keyword.arg] = self._evaluate(keyword.value, imports)
            return self._instantiate(target, node.func, args, kwargs)

        if isinstance(node, (ast.Name, ast.Attribute)):
            target = self._annotation_class(node, imports)
            if target is not None:
                return self._instantiate(target, node, [], {})

        if isinstance(node, (ast.List, ast.Tuple, ast.Set)):
            return [self._evaluate(item, imports) for item in node.elts]

        if isinstance(node, ast.Dict):
            if any(key is None for key in node.keys):
                raise AnnotationError(f"Unsupported dict unpacking in {ast.unparse(node)}")
            try:
                return {self._evaluate(key, imports): self._evaluate(value, imports) for key, value in zip(node.keys, node.values)}
            except TypeError as e:
                raise AnnotationError(f"Unsupported dict key in {ast.unparse(node)}") from e

        try:
            return ast.literal_eval(node)
        except (ValueError, TypeError, SyntaxError) as e:
            raise AnnotationError(f"Unsupported expression {ast.unparse(node)}") from e


def scan(path: str | Path, analysis: Analysis | None = None, namespaces: Iterable[str] = ()) -> Swagger:
    """Scan ``path`` and return the assembled Swagger document."""
    analysis = analysis if analysis is not None else Analysis()
    scanner = Scanner((*analysis.namespaces, *namespaces))
    scanner.scan(Path(path), analysis)
    return analysis.process()
