"""thickness_event/plotting.py
Author: Sabin Thapa <sthapa3@kent.edu>

Matplotlib helpers for thickness grids.

Defaults: no grid lines, no titles, clean spines, lower-origin images
spanning the physical grid extent.
"""

from __future__ import annotations

import matplotlib as mpl
import matplotlib.pyplot as plt


def set_pub_style():
    mpl.rcParams.update({
        "figure.dpi": 120,
        "savefig.dpi": 300,
        "axes.grid": False,
        "axes.spines.top": False,
        "axes.spines.right": False,
        "legend.frameon": False,
        "font.size": 12,
        "axes.labelsize": 12,
        "image.cmap": "inferno",
        "image.origin": "lower",
        "mathtext.fontset": "stix",
    })


def style_ax(ax):
    ax.grid(False)
    ax.set_title("")
    for spine in ("top", "right"):
        ax.spines[spine].set_visible(False)


def add_panel_label(ax, label: str, *, x: float = 0.03, y: float = 0.97):
    ax.text(x, y, label, transform=ax.transAxes, ha="left", va="top",
            fontsize=12, fontweight="bold", color="white")


def plot_grid(ax, values, grid, *, label: str | None = None, colorbar: bool = True, **imshow_kw):
    """Draw an (N, N) grid over its physical extent [fm]."""
    im = ax.imshow(values, extent=grid.extent(), origin="lower", **imshow_kw)
    ax.set_xlabel(r"$x$ [fm]")
    ax.set_ylabel(r"$y$ [fm]")
    style_ax(ax)
    if label:
        add_panel_label(ax, label)
    if colorbar:
        ax.figure.colorbar(im, ax=ax, fraction=0.046, pad=0.04)
    return im


def plot_event(event, *, figsize=(13.0, 4.0)):
    """T_A, T_B and T_R side by side; the center of mass is marked on T_R."""
    fig, axes = plt.subplots(1, 3, figsize=figsize, constrained_layout=True)
    for ax, values, label in zip(axes, (event.TA, event.TB, event.TR), (r"$T_A$", r"$T_B$", r"$T_R$")):
        plot_grid(ax, values, event.grid, label=label)
    xcm, ycm = event.center_of_mass()
    axes[2].plot([xcm], [ycm], marker="+", color="cyan", markersize=10, linestyle="none")
    return fig
