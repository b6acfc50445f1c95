"""
Plotting helpers for stress fields through the cylinder wall.

All save outputs are forced to `.svg` when `save_path` is provided.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt

from .compound.analysis import CompoundStressField
from .cylinder.field import StressField
from .units import UnitSystem, from_si, units_for

CURVES = (
    ("sigma_r", "Radial σ_r", "tab:blue", "-"),
    ("sigma_theta", "Hoop σ_θ", "tab:orange", "-"),
    ("sigma_vm", "Von Mises σ_vm", "tab:red", "--"),
)


def _to_system(values: np.ndarray, quantity: str, system: UnitSystem) -> np.ndarray:
    if system == UnitSystem.SI:
        return np.asarray(values, dtype=float)
    return np.array([from_si(float(v), quantity, system) for v in values])


def _draw_field(ax: plt.Axes, field: StressField, system: UnitSystem, label_prefix: str = "") -> None:
    radii = _to_system(field.radii, "length", system)
    for attr, label, color, linestyle in CURVES:
        values = _to_system(getattr(field, attr), "stress", system)
        ax.plot(
            radii,
            values,
            color=color,
            linestyle=linestyle,
            linewidth=2,
            label=f"{label_prefix}{label}" if label_prefix else label,
        )


def _finish(
    fig: plt.Figure,
    ax: plt.Axes,
    title: str,
    system: UnitSystem,
    show: bool,
    save_path: str | Path | None,
) -> None:
    units = units_for(system)
    ax.axhline(0.0, color="black", linewidth=0.8)
    ax.set_xlabel(f"Radius ({units['length']})")
    ax.set_ylabel(f"Stress ({units['stress']})")
    ax.grid(True, alpha=0.3, linestyle="--")
    ax.legend(loc="upper right")
    ax.set_title(title, fontsize=12)

    plt.tight_layout()

    if save_path is not None:
        out = Path(save_path)
        if out.suffix.lower() != ".svg":
            out = out.with_suffix(".svg")
        fig.savefig(str(out), format="svg", bbox_inches="tight")

    if show:
        plt.show()


def plot_stress_field(
    field: StressField,
    system: UnitSystem = UnitSystem.SI,
    *,
    title: str | None = None,
    ax: plt.Axes | None = None,
    show: bool = True,
    save_path: str | Path | None = None,
) -> plt.Axes:
    """Plot radial, hoop and Von Mises stress across a single wall."""
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 6))
    else:
        fig = ax.figure

    _draw_field(ax, field, system)

    if title is None:
        units = units_for(system)
        peak = from_si(field.max_von_mises, "stress", system)
        title = f"Stress Distribution (max σ_vm = {peak:.1f} {units['stress']})"

    _finish(fig, ax, title, system, show, save_path)
    return ax


def plot_compound_stress_field(
    field: CompoundStressField,
    system: UnitSystem = UnitSystem.SI,
    *,
    title: str | None = None,
    ax: plt.Axes | None = None,
    show: bool = True,
    save_path: str | Path | None = None,
) -> plt.Axes:
    """Plot barrel and trunnion stresses with the interface marked."""
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 6))
    else:
        fig = ax.figure

    _draw_field(ax, field.barrel, system)

    # Trunnion curves reuse the colours; only the legend entries are dropped.
    radii = _to_system(field.trunnion.radii, "length", system)
    for attr, _, color, linestyle in CURVES:
        values = _to_system(getattr(field.trunnion, attr), "stress", system)
        ax.plot(radii, values, color=color, linestyle=linestyle, linewidth=2)

    interface = from_si(field.interface_radius, "length", system)
    ax.axvline(interface, color="gray", linestyle=":", linewidth=1.5, label="Interface")

    if title is None:
        title = "Compound Cylinder Stress Distribution"

    _finish(fig, ax, title, system, show, save_path)
    return ax


__all__ = ["plot_stress_field", "plot_compound_stress_field"]
