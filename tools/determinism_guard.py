"""
Determinism guard (static check).

Rock Field replays exactly from a seed only while every random draw goes through
game.sim.determinism (rand_int / rand_float / @seeded) and nothing reads the clock.
This walks the AST of everything under game/ except game/sim and reports:

- random_import    `import random` / `from random import ...`
- raw_rng          random.Random(...) built by hand, seeded or not
- global_rng       module-level random.* calls (shared, unseeded state)
- wall_clock_time  time.time(), pygame.time.get_ticks(), datetime.now(), ...
- unstable_hash    hash(), which is salted per process for str/bytes

Import aliases are followed, so `from random import randint as ri; ri(1, 2)` is
still a global_rng finding.
"""

from __future__ import annotations

import argparse
import ast
import json
from pathlib import Path
from typing import Iterable


PROJECT_ROOT = Path(__file__).resolve().parents[1]
SIM_ROOT = PROJECT_ROOT / "game"
SEEDED_ROOT = PROJECT_ROOT / "game" / "sim"

_RNG_CLASSES = {"random.Random", "random.SystemRandom"}

_WALL_CLOCK = {
    "time.time",
    "time.time_ns",
    "time.monotonic",
    "time.perf_counter",
    "pygame.time.get_ticks",
    "datetime.datetime.now",
    "datetime.datetime.utcnow",
    "datetime.date.today",
}

_HINTS = {
    "random_import": "thread a seed through game.sim.determinism instead of importing random",
    "raw_rng": "build draws with rand_int/rand_float; only game/sim may own a Random",
    "global_rng": "module-level random state is shared and unseeded; use rand_int/rand_float",
    "wall_clock_time": "advance by the dt passed to tick(), never by the clock",
    "unstable_hash": "hash() is salted per process; use derive_seed (crc32)",
}


def _is_under(path: Path, parent: Path) -> bool:
    try:
        path.resolve().relative_to(parent.resolve())
        return True
    except ValueError:
        return False


def _rel(file: Path) -> str:
    if _is_under(file, PROJECT_ROOT):
        return str(file.resolve().relative_to(PROJECT_ROOT.resolve()))
    return str(file)


class _Scanner(ast.NodeVisitor):
    """Collects findings for one module, resolving names through its imports."""

    def __init__(self, file: Path):
        self.file = file
        self.aliases: dict[str, str] = {}
        self.findings: list[dict] = []

    def _report(self, kind: str, node: ast.AST, what: str) -> None:
        self.findings.append(
            {
                "kind": kind,
                "file": _rel(self.file),
                "line": getattr(node, "lineno", 0),
                "col": getattr(node, "col_offset", 0),
                "detail": f"{what}: {_HINTS[kind]}",
            }
        )

    def visit_Import(self, node: ast.Import) -> None:
        for alias in node.names:
            top = alias.name.split(".")[0]
            if alias.asname:
                self.aliases[alias.asname] = alias.name
            else:
                self.aliases[top] = top
            if top == "random":
                self._report("random_import", node, f"import {alias.name}")

    def visit_ImportFrom(self, node: ast.ImportFrom) -> None:
        module = node.module or ""
        for alias in node.names:
            self.aliases[alias.asname or alias.name] = f"{module}.{alias.name}"
        if module == "random":
            names = ", ".join(a.name for a in node.names)
            self._report("random_import", node, f"from random import {names}")

    def _qualified(self, func: ast.AST) -> str | None:
        parts: list[str] = []
        while isinstance(func, ast.Attribute):
            parts.append(func.attr)
            func = func.value
        if not isinstance(func, ast.Name):
            return None
        head = self.aliases.get(func.id, func.id)
        return ".".join([head, *reversed(parts)])

    def visit_Call(self, node: ast.Call) -> None:
        name = self._qualified(node.func)
        if name in _RNG_CLASSES:
            self._report("raw_rng", node, f"{name}()")
        elif name and name.startswith("random."):
            self._report("global_rng", node, f"{name}()")
        elif name in _WALL_CLOCK:
            self._report("wall_clock_time", node, f"{name}()")
        elif name == "hash":
            self._report("unstable_hash", node, "hash()")
        self.generic_visit(node)


def scan_file(file_path: Path) -> list[dict]:
    src = file_path.read_text(encoding="utf-8", errors="replace")
    try:
        tree = ast.parse(src, filename=str(file_path))
    except SyntaxError as e:
        return [
            {
                "kind": "parse_error",
                "file": _rel(file_path),
                "line": e.lineno or 0,
                "col": e.offset or 0,
                "detail": f"SyntaxError: {e.msg}",
            }
        ]
    scanner = _Scanner(file_path)
    scanner.visit(tree)
    return scanner.findings


def _iter_py_files(roots: Iterable[Path]) -> list[Path]:
    out: set[Path] = set()
    for root in roots:
        if root.is_file():
            out.add(root)
        elif root.is_dir():
            out.update(p for p in root.rglob("*.py") if not _is_under(p, SEEDED_ROOT))
    return sorted(out)


def scan_paths(roots: Iterable[Path] | None = None) -> list[dict]:
    """Scan `roots` (default: game/ minus game/sim) and return all findings."""
    roots = list(roots) if roots else [SIM_ROOT]
    findings: list[dict] = []
    for f in _iter_py_files(roots):
        findings.extend(scan_file(f))
    return findings


def main() -> int:
    ap = argparse.ArgumentParser(description="Static determinism guard for Rock Field simulation code")
    ap.add_argument("--paths", nargs="*", default=[], help="files or dirs to scan (default: game/ minus game/sim)")
    ap.add_argument("--json", action="store_true", help="emit machine-readable JSON")
    ns = ap.parse_args()

    findings = scan_paths([Path(p) for p in ns.paths])

    if ns.json:
        print(json.dumps({"findings": findings}, indent=2))
    elif not findings:
        print("[determinism_guard] PASS: no violations found")
    else:
        print(f"[determinism_guard] FAIL: {len(findings)} violation(s)")
        for v in findings:
            print(f"- {v['file']}:{v['line']}:{v['col']} [{v['kind']}] {v['detail']}")

    return 0 if not findings else 1


if __name__ == "__main__":
    raise SystemExit(main())
