"""Static figure export with matplotlib."""

import numpy as np
from matplotlib.figure import Figure


def save_component_grid(components: np.ndarray, path: str, title: str = "") -> None:
    """Save an (N, N, N, N) stack of basis previews as an N x N grid of tiles."""
    N = components.shape[0]
    fig = Figure(figsize=(max(3, N * 0.6), max(3, N * 0.6)), dpi=100)
    axes = fig.subplots(N, N, squeeze=False)
    for row in range(N):
        for col in range(N):
            ax = axes[row][col]
            ax.imshow(components[row, col], cmap='gray', vmin=0.0, vmax=1.0,
                      interpolation='nearest')
            ax.set_xticks([])
            ax.set_yticks([])
    if title:
        fig.suptitle(title, fontsize=10)
    fig.savefig(path)


def save_comparison(original: np.ndarray, reconstructed: np.ndarray, path: str,
                    mask: np.ndarray = None, title: str = "") -> None:
    """Side-by-side original / reconstruction, plus the mask when given."""
    panels = [(original, "Original"), (np.clip(reconstructed, 0, 1), "Reconstructed")]
    if mask is not None:
        panels.append((mask.astype(np.float64), "Retained coefficients"))
    
    fig = Figure(figsize=(4 * len(panels), 4), dpi=100)
    axes = fig.subplots(1, len(panels), squeeze=False)[0]
    for ax, (data, label) in zip(axes, panels):
        ax.imshow(data, cmap='gray', vmin=0.0, vmax=1.0, interpolation='nearest')
        ax.set_title(label, fontsize=10)
        ax.set_xticks([])
        ax.set_yticks([])
    if title:
        fig.suptitle(title, fontsize=11)
    fig.tight_layout()
    fig.savefig(path)
