import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np


def plot_heatmap(hist, max_runs=15, ax=None, show=True):
    """Joint score probabilities for 0..max_runs runs per side, with the tie diagonal outlined."""
    size = min(max_runs + 1, hist.max_score)
    prob_matrix = hist.probabilities()[:size, :size]

    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 8))
    sns.heatmap(prob_matrix, cmap="viridis", cbar=True, ax=ax)
    ax.invert_yaxis()
    ax.set_title("Joint Score Distribution", fontsize=14)
    ax.set_xlabel("Home Runs Scored", fontsize=12)
    ax.set_ylabel("Away Runs Scored", fontsize=12)

    for k in range(size):
        ax.plot([k, k+1, k+1, k, k], [k, k, k+1, k+1, k], color='black', lw=1)

    if show:
        plt.tight_layout()
        plt.show()
    return ax


def plot_marginals(hist, max_runs=15, ax=None, show=True):
    size = min(max_runs + 1, hist.max_score)
    away, home = hist.marginals()
    n = hist.total()
    runs = np.arange(size)

    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 5))
    width = 0.4
    ax.bar(runs - width / 2, away[:size] / n, width=width, label="Away")
    ax.bar(runs + width / 2, home[:size] / n, width=width, label="Home")
    ax.set_xticks(runs)
    ax.set_title("Runs per Game", fontsize=14)
    ax.set_xlabel("Runs", fontsize=12)
    ax.set_ylabel("Probability", fontsize=12)
    ax.legend()

    if show:
        plt.tight_layout()
        plt.show()
    return ax
