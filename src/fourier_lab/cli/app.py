# cli/app.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
import json
import importlib.resources as ir

import typer
from rich import print as rprint
from rich.table import Table

from fourier_lab import __version__
from fourier_lab.bases.base import SystemId
from fourier_lab.bases.registry import SYSTEM_ORDER
from fourier_lab.config import SAMPLE_FUNCTIONS, SYSTEM_LABELS, find_sample_function
from fourier_lab.diagnostics.core import convergence as convergence_rows, residual
from fourier_lab.series import CoefficientSet, FourierEngine
from fourier_lab.utils.curves import sample_function

app = typer.Typer(no_args_is_help=True, add_completion=False,
                  help="Fourier Lab - series expansions of sampled curves")


# ---------- dataclasses ----------
@dataclass
class RunSpec:
    function: str
    system: SystemId
    order: int
    samples: int = 1000
    domain: Optional[Tuple[float, float]] = None    # None: the function's own domain
    verbose: bool = False
    tag: Optional[str] = None
    results_dir: str = "results"


# ---------- tiny IO helpers ----------
def _read_text_from_path_or_resource(path: Path, resource_pkg: str, resource_subdir: str | None = None) -> str:
    """
    Read text from a filesystem path if it exists; otherwise, try to read
    from package resources under `resource_pkg[/resource_subdir]`.
    """
    p = Path(path)
    if p.exists():
        return p.read_text()
    try:
        base = ir.files(resource_pkg)
        if resource_subdir:
            base = base.joinpath(resource_subdir)
        return (base / p.name).read_text(encoding="utf-8")
    except (FileNotFoundError, ModuleNotFoundError) as e:
        raise typer.BadParameter(f"Config not found: {path}") from e


def read_config(path: Path) -> Any:
    text = _read_text_from_path_or_resource(path, "fourier_lab.cli", resource_subdir="cfgs")
    return json.loads(text)


def coerce_value(v: str) -> Any:
    # int, float, bool, else str
    if v.lstrip("-").isdigit():
        return int(v)
    try:
        return float(v)
    except ValueError:
        if v.lower() in ("true", "false"):
            return v.lower() == "true"
        return v


def apply_overrides(cfg: Dict[str, Any], overrides: List[str]) -> Dict[str, Any]:
    # overrides format: key=val (shallow keys only)
    for ov in overrides:
        if "=" not in ov:
            raise typer.BadParameter(f"Invalid override '{ov}', expected key=value")
        k, v = ov.split("=", 1)
        cfg[k] = coerce_value(v)
    return cfg


def to_spec(d: Dict[str, Any]) -> RunSpec:
    try:
        system = SystemId(d.get("system", "standard"))
    except ValueError:
        raise typer.BadParameter(f"Unknown basis system: {d.get('system')}")
    if "function" not in d or "order" not in d:
        raise typer.BadParameter("Each experiment needs 'function' and 'order'")
    domain = d.get("domain")
    return RunSpec(
        function=str(d["function"]),
        system=system,
        order=int(d["order"]),
        samples=int(d.get("samples", 1000)),
        domain=(float(domain[0]), float(domain[1])) if domain else None,
        verbose=bool(d.get("verbose", False)),
        tag=d.get("tag"),
        results_dir=d.get("results_dir", "results"),
    )


def _sampled(name: str, samples: int, domain: Optional[Tuple[float, float]] = None):
    try:
        fn = find_sample_function(name)
    except KeyError as e:
        raise typer.BadParameter(str(e.args[0]))
    a, b = domain if domain else fn.domain
    return sample_function(fn.func, a, b, samples), a, b


def _coef_table(coefs: CoefficientSet) -> Table:
    label = SYSTEM_LABELS[coefs.system_id]
    table = Table(title=f"{label.label} on [{coefs.domain[0]:.4g}, {coefs.domain[1]:.4g}]")
    table.add_column("k", justify="right")
    for fam in label.families:
        table.add_column(fam.prefix + "_k", justify="right")
    table.add_row("0", *(_fmt(coefs.c0) if i == 0 else "" for i in range(len(label.families))))
    for k in range(1, coefs.max_k + 1):
        table.add_row(str(k), *(_fmt(fam.coefficients[k - 1]) for fam in coefs.families))
    return table


def _fmt(v: Optional[float]) -> str:
    return "undefined" if v is None else f"{v:.6f}"


def _coef_progress(info: Dict[str, Any]) -> None:
    name = "c0" if info["k"] == 0 else f"{info['family']}_{info['k']}"
    rprint(f"order {info['k']}/{info['max_k']}  {name} = {_fmt(info['value'])}")


def _order_progress(info: Dict[str, Any]) -> None:
    rprint(f"order {info['order']}  residual = {info['residual']:.6g}")


# ---------- runner ----------
def run_once(spec: RunSpec, engine: Optional[FourierEngine] = None) -> Dict[str, Any]:
    engine = engine or FourierEngine()
    curve, a, b = _sampled(spec.function, spec.samples, spec.domain)
    hook = _coef_progress if spec.verbose else None
    coefs = engine.compute_coefs(curve, a, b, spec.order, spec.system, progress_hook=hook)
    err = residual(coefs, curve, engine=engine)
    if spec.verbose:
        rprint(_coef_table(coefs))
        rprint(f"[bold]Residual (RMS)[/]: {err:.6g}")

    out_dir = Path(spec.results_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / "results.jsonl"
    row = dict(
        function=spec.function, system=spec.system.value, order=spec.order,
        samples=spec.samples, tag=spec.tag or "", residual=err,
        coefficients=coefs.to_dict(),
    )
    with out_path.open("a") as f:
        f.write(json.dumps(row) + "\n")
    typer.echo(f"Wrote → {out_path}")
    return row


# ---------- CLI commands ----------
@app.command("version")
def version():
    """Print the package version."""
    typer.echo(__version__)


@app.command("info")
def info():
    """List the basis systems and the example functions."""
    table = Table(title="Basis systems")
    table.add_column("id", no_wrap=True)
    table.add_column("label")
    table.add_column("terms")
    for sid in SYSTEM_ORDER:
        label = SYSTEM_LABELS[sid]
        table.add_row(sid.value, label.label, "; ".join(f.plot_title for f in label.families))
    rprint(table)

    fns = Table(title="Example functions")
    fns.add_column("name")
    fns.add_column("domain")
    for fn in SAMPLE_FUNCTIONS:
        fns.add_row(fn.name, f"[{fn.domain[0]:.4g}, {fn.domain[1]:.4g}]")
    rprint(fns)


@app.command("coefs")
def coefs(
    function: str = typer.Option(..., "--function", "-f", help="Example function name (see `info`)"),
    system: SystemId = typer.Option(SystemId.standard, "--system", "-s", help="Basis system"),
    order: int = typer.Option(5, "--order", "-k", min=0, help="Highest coefficient index"),
    samples: int = typer.Option(1000, "--samples", "-n", min=1, help="Sampling intervals of the function"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print each coefficient as it is computed"),
):
    """Compute the coefficients of an example function."""
    curve, a, b = _sampled(function, samples)
    hook = _coef_progress if verbose else None
    result = FourierEngine().compute_coefs(curve, a, b, order, system, progress_hook=hook)
    if as_json:
        typer.echo(json.dumps(result.to_dict()))
    else:
        rprint(_coef_table(result))


@app.command("convergence")
def convergence(
    function: str = typer.Option(..., "--function", "-f", help="Example function name (see `info`)"),
    system: SystemId = typer.Option(SystemId.standard, "--system", "-s", help="Basis system"),
    max_order: int = typer.Option(8, "--max-order", "-k", min=1, help="Highest truncation order"),
    samples: int = typer.Option(1000, "--samples", "-n", min=1, help="Sampling intervals of the function"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print each order as it finishes"),
):
    """Residual of the partial sums for orders 1..max-order."""
    curve, a, b = _sampled(function, samples)
    table = Table(title=f"{function} / {SYSTEM_LABELS[system].label}")
    table.add_column("order", justify="right")
    table.add_column("residual (RMS)", justify="right")
    for order, err in convergence_rows(curve, a, b, range(1, max_order + 1), system, engine=FourierEngine(),
                                       progress_hook=_order_progress if verbose else None):
        table.add_row(str(order), f"{err:.6g}")
    rprint(table)


@app.command("run")
def run(
    config: Path = typer.Option(..., "--config", "-c", help="Path to JSON config (single or sweep)"),
    override: List[str] = typer.Option(None, "--override", "-o", help="Shallow key=val overrides"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Per-order progress and the coefficient table"),
):
    """Run one experiment, a list of experiments, or a defaults/experiments sweep."""
    cfg = read_config(config)
    overrides_dict: Dict[str, Any] = apply_overrides({}, override) if override else {}
    if verbose:
        overrides_dict["verbose"] = True
    engine = FourierEngine()

    # ---- Case A: top-level list -> many experiments ----
    if isinstance(cfg, list):
        for i, exp in enumerate(cfg):
            spec = to_spec({**exp, **overrides_dict})
            if not spec.tag:
                spec.tag = f"exp{i}"
            run_once(spec, engine)
        return

    # ---- Case B: sweep dict with defaults/experiments ----
    if isinstance(cfg, dict) and "experiments" in cfg:
        defaults = {**cfg.get("defaults", {}), **overrides_dict}
        sweep_tag = cfg.get("sweep_tag")
        exps = cfg["experiments"]
        if not isinstance(exps, list):
            raise typer.BadParameter("'experiments' must be a list")
        for i, exp in enumerate(exps):
            merged = {**defaults, **exp}
            if sweep_tag and not merged.get("tag"):
                merged["tag"] = f"{sweep_tag}_exp{i}"
            run_once(to_spec(merged), engine)
        return

    # ---- Case C: single experiment dict ----
    if isinstance(cfg, dict):
        run_once(to_spec({**cfg, **overrides_dict}), engine)
        return

    raise typer.BadParameter("Config must be a dict (single/sweep) or a list of experiment dicts.")


def main():
    app()


if __name__ == "__main__":
    main()
