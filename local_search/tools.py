from typing import Optional, Union

import matplotlib.pyplot as plt
import pandas as pd

from .core.abstract_search import AbstractSearch
from .core.listeners import HistoryRecorder


def plot_cost_history(history: Union[HistoryRecorder, pd.DataFrame], ax: Optional[plt.Axes] = None,
                      title: str = "Cost Function History") -> plt.Axes:
    """
    Plot the working cost recorded by a HistoryRecorder.

    Args:
        history: HistoryRecorder or its DataFrame (see HistoryRecorder.to_dataframe).
        ax: Axes to draw on. A new figure is created when None.
        title: Title of the plot.
    """
    df = history.to_dataframe() if isinstance(history, HistoryRecorder) else history

    if ax is None:
        _, ax = plt.subplots(figsize=(10, 4))

    moves = df[df['Step'] == AbstractSearch.MOVE_MADE]
    improvements = df[df['Step'] == AbstractSearch.IMPROVEMENT_MADE]

    ax.plot(moves['Iteration'].to_numpy(), moves['Current_Cost'].to_numpy(), color='tab:blue', linewidth=1.5,
            label='Current Cost')
    if not improvements.empty:
        ax.scatter(improvements['Iteration'].to_numpy(), improvements['Current_Cost'].to_numpy(), color='tab:orange',
                   s=20, marker='o', label='New Best', zorder=3)

    ax.set_xlabel("Iteration")
    ax.set_ylabel("Cost")
    ax.set_title(title)
    ax.legend(loc='upper right', framealpha=0.9, fontsize=8)
    return ax
