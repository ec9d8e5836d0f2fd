#!/usr/bin/env python3
"""
Boolean Operation Visualization

Draws a rectangle and a circle, then their union, intersection,
difference and symmetric difference side by side using matplotlib
PathPatch objects from ``Shape.to_mpl_patch``.

Usage:
    python plot_boolean_operations.py

This will create an interactive plot and save 'boolean_operations.png'
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

try:
    import matplotlib.pyplot as plt
except ImportError:
    print("Matplotlib not available - install with: pip install matplotlib")
    sys.exit(1)

from vectorgeometry import Circle, Matrix3x3, Rectangle, combine_shapes


def main():
    print("Boolean Operation Visualization")
    print("=" * 40)

    rect = Rectangle(0, 0, 120, 80, scale_origin="center")
    rect = rect.apply_transform(Matrix3x3.rotation(0.2))
    circle = Circle(110, 60, 50)

    operations = ["union", "intersect", "subtract", "xor"]
    fig, axes = plt.subplots(1, len(operations) + 1, figsize=(20, 4))

    axes[0].add_patch(rect.to_mpl_patch(facecolor="tab:blue", alpha=0.5))
    axes[0].add_patch(circle.to_mpl_patch(facecolor="tab:orange", alpha=0.5))
    axes[0].set_title("Inputs")

    for ax, operation in zip(axes[1:], operations):
        result = combine_shapes(rect, circle, operation)
        ax.add_patch(result.to_mpl_patch(facecolor="tab:green", edgecolor="black"))
        ax.set_title(operation)
        print(f"✓ {operation}: {len(result.points)} points, bounds {result.bounds}")

    for ax in axes:
        ax.set_xlim(-40, 180)
        ax.set_ylim(-40, 140)
        ax.set_aspect("equal")
        ax.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig("boolean_operations.png", dpi=150, bbox_inches="tight")
    print("✓ Saved plot as 'boolean_operations.png'")
    plt.show()


if __name__ == "__main__":
    main()
