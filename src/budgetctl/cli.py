from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

from . import __version__
from .budgets import Diagnostic, evaluate, partition_rules
from .config.loader import load_budgets
from .errors import ScriptError
from .exit_codes import ERR_BUDGET, ERR_INTERNAL, ERR_USAGE, OK
from .logging import log_event
from .manifest import BuildManifest, load_manifest
from .reporting import build_report, render_text, shown_diagnostics


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="budgetctl", description="check build output against size budgets")
    p.add_argument("--version", action="version", version=f"budgetctl {__version__}")
    p.add_argument("--json", action="store_true", help="emit JSON output")
    p.add_argument("--format", choices=["text", "json"], default=None, help="output format")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable verbose diagnostics")
    vg.add_argument("--quiet", action="store_true", help="only emit errors")
    sub = p.add_subparsers(dest="cmd", required=True)

    check_p = sub.add_parser("check", help="evaluate whole-build budgets against a build manifest")
    check_p.add_argument("--budgets", required=True, help="budget file (.json, .yaml, .yml)")
    check_p.add_argument("--manifest", required=True, help="build stats JSON with chunks and assets")
    check_p.add_argument("--out-file", help="optional output path for the JSON report")
    check_p.add_argument("--max-diagnostics", type=int, help="list at most N diagnostics (counts and exit code still cover all)")

    asset_p = sub.add_parser("check-asset", help="evaluate component style budgets for one emitted file")
    asset_p.add_argument("--budgets", required=True, help="budget file (.json, .yaml, .yml)")
    asset_p.add_argument("--name", required=True, help="asset file name used as the diagnostic label")
    asset_p.add_argument("--size", required=True, type=int, help="asset size in bytes")
    asset_p.add_argument("--out-file", help="optional output path for the JSON report")

    validate_p = sub.add_parser("validate", help="validate a budget file without evaluating it")
    validate_p.add_argument("--budgets", required=True, help="budget file (.json, .yaml, .yml)")

    sub.add_parser("version", help="print version")
    return p


def _resolve_format(ns: argparse.Namespace) -> str:
    if ns.json:
        return "json"
    if ns.format:
        return ns.format
    env_format = os.environ.get("BUDGETCTL_FORMAT", "").strip()
    if env_format in {"text", "json"}:
        return env_format
    return "json" if "CI" in os.environ else "text"


def _emit(payload: dict[str, object], as_json: bool) -> None:
    if as_json:
        print(json.dumps(payload, sort_keys=True))
    else:
        print(json.dumps(payload, indent=2, sort_keys=True))


def _write_report(out_file: str | None, payload: dict[str, object]) -> None:
    if not out_file:
        return
    out_path = Path(out_file)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(payload, indent=2, sort_keys=True) + "\n", encoding="utf-8")


def _finish(diagnostics: list[Diagnostic], ns: argparse.Namespace, as_json: bool, max_diagnostics: int | None = None) -> int:
    payload = build_report(diagnostics, max_diagnostics)
    _write_report(getattr(ns, "out_file", None), payload)
    if as_json:
        _emit(payload, True)
    else:
        for line in render_text(shown_diagnostics(diagnostics, max_diagnostics)):
            print(line)
        print(f"budgets {ns.cmd}: {payload['status']} ({payload['warning_count']} warnings, {payload['error_count']} errors)")
    if not ns.quiet:
        log_event(
            "info",
            "cli",
            "done",
            json_output=as_json,
            cmd=ns.cmd,
            status=payload["status"],
            warnings=payload["warning_count"],
            errors=payload["error_count"],
        )
    return OK if payload["status"] == "pass" else ERR_BUDGET


def _run_check(ns: argparse.Namespace, as_json: bool) -> int:
    rules = load_budgets(Path(ns.budgets), json_output=as_json)
    manifest = load_manifest(Path(ns.manifest))
    _, whole_build = partition_rules(rules)
    if ns.verbose:
        log_event(
            "info",
            "cli",
            "loaded",
            json_output=as_json,
            rules=len(whole_build),
            chunks=len(manifest.chunks),
            assets=len(manifest.assets),
        )
    return _finish(list(evaluate(whole_build, manifest)), ns, as_json, ns.max_diagnostics)


def _run_check_asset(ns: argparse.Namespace, as_json: bool) -> int:
    rules = load_budgets(Path(ns.budgets), json_output=as_json)
    per_file, _ = partition_rules(rules)
    manifest = BuildManifest.single_asset(ns.name, ns.size)
    return _finish(list(evaluate(per_file, manifest)), ns, as_json)


def _run_validate(ns: argparse.Namespace, as_json: bool) -> int:
    rules = load_budgets(Path(ns.budgets), json_output=as_json)
    payload = {
        "schema_version": 1,
        "tool": "budgetctl",
        "status": "ok",
        "budgets": ns.budgets,
        "rule_count": len(rules),
        "types": sorted({r.type.value for r in rules}),
    }
    if as_json:
        _emit(payload, True)
    else:
        print(f"{ns.budgets}: {len(rules)} budget rule(s) valid")
    return OK


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    ns = p.parse_args(argv)
    fmt = _resolve_format(ns)
    as_json = fmt == "json"
    try:
        if ns.verbose:
            log_event("info", "cli", "start", json_output=as_json, cmd=ns.cmd, fmt=fmt)
        if ns.cmd == "version":
            _emit({"schema_version": 1, "tool": "budgetctl", "version": __version__}, as_json)
            return OK
        if ns.cmd == "check":
            return _run_check(ns, as_json)
        if ns.cmd == "check-asset":
            return _run_check_asset(ns, as_json)
        if ns.cmd == "validate":
            return _run_validate(ns, as_json)
        return ERR_USAGE
    except ScriptError as exc:
        if as_json:
            print(
                json.dumps(
                    {
                        "schema_version": 1,
                        "tool": "budgetctl",
                        "status": "fail",
                        "error": {"message": str(exc), "code": exc.code, "kind": exc.kind},
                    },
                    sort_keys=True,
                ),
                file=sys.stderr,
            )
        else:
            print(str(exc), file=sys.stderr)
        return exc.code
    except Exception as exc:  # pragma: no cover
        if as_json:
            print(
                json.dumps(
                    {
                        "schema_version": 1,
                        "tool": "budgetctl",
                        "status": "fail",
                        "error": {"message": f"internal error: {exc}", "code": ERR_INTERNAL},
                    },
                    sort_keys=True,
                ),
                file=sys.stderr,
            )
        else:
            print(f"internal error: {exc}", file=sys.stderr)
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
