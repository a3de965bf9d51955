import os

import matplotlib.pyplot as plt
import numpy as np

from fuzzycore.variable import Evaluation, FuzzyVariable


def plot_variable(
    variable: FuzzyVariable,
    x=None,
    evaluation: Evaluation = None,
    save=False,
    output_dir="plots",
    show=True,
):
    """
    Plot the low/medium/high membership shapes of a fuzzy variable.
    Optionally mark an evaluated input and its crisp value.
    Args:
        variable (FuzzyVariable): Variable to draw
        x (float): Evaluated input to mark (optional)
        evaluation (Evaluation): Degrees of x; computed when omitted
        save (bool): Whether to save the plot as a PNG
        output_dir (str): Directory to save the plot
        show (bool): Whether to open a window
    Returns:
        str or None: Path of the saved PNG, if saved
    """
    shapes = {"low": variable.low, "medium": variable.medium, "high": variable.high}
    lo = min(s.support()[0] for s in shapes.values())
    hi = max(s.support()[1] for s in shapes.values())
    grid = np.linspace(lo, hi, 401)

    fig = plt.figure(figsize=(8, 4))
    for label, shape in shapes.items():
        mu = np.array([shape.membership_degree(v) for v in grid])
        plt.plot(grid, mu, label=label)
        plt.fill_between(grid, mu, alpha=0.1)

    if x is not None:
        if evaluation is None:
            evaluation = variable.evaluate(x)
        degrees = evaluation.degrees()
        plt.scatter(
            [x] * len(degrees),
            list(degrees.values()),
            color="red",
            s=30,
            marker="o",
            edgecolors="black",
            linewidths=0.8,
            label=f"input = {x:g}",
            zorder=10,
        )
        crisp = variable.crisp_value(evaluation)
        plt.axvline(crisp, color="black", linestyle="--", label=f"crisp = {crisp:.2f}")

    title = variable.name or "variable"
    plt.title(f"Membership Functions – {title}")
    plt.xlabel("Value")
    plt.ylabel("Membership Degree")
    plt.ylim(-0.05, 1.05)
    plt.grid(True)
    plt.legend()
    plt.tight_layout()

    filename = None
    if save:
        os.makedirs(output_dir, exist_ok=True)
        filename = os.path.join(output_dir, f"{title.lower()}_membership_functions.png")
        plt.savefig(filename)
        print(f"Saved plot to: {filename}")

    if show:
        plt.show()
    plt.close(fig)
    return filename
