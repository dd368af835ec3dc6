import logging
from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional

import pandas as pd

from .observer import Observer

if TYPE_CHECKING:
    from .abstract_search import AbstractSearch

logger = logging.getLogger(__name__)


class SearchListener(Observer):
    """
    Object called back during the search progress.

    Remember to attach it to the search to be observed (AbstractSearch.attach).
    """

    @abstractmethod
    def update(self, search: "AbstractSearch") -> None:
        """Called by the search when a move, an improvement or something else happens."""
        pass


class ProgressLogger(SearchListener):
    """Logs one line per notification."""

    def __init__(self, level: int = logging.INFO, log: Optional[logging.Logger] = None):
        self.level = level
        self.log = log if log is not None else logger

    def update(self, search: "AbstractSearch") -> None:
        self.log.log(self.level, "Iteration %d: %s, Current Cost = %.2f, Move = %r",
                     search.iteration, search.step_name(),
                     search.working.cost_function(), search.current_move)


class HistoryRecorder(SearchListener):
    """Keeps a row per notification, exportable as a pandas DataFrame."""

    COLUMNS = ['Iteration', 'Step', 'Step_Name', 'Current_Cost', 'Move']

    def __init__(self):
        self.rows: List[Dict[str, Any]] = []

    def update(self, search: "AbstractSearch") -> None:
        self.rows.append({
            'Iteration': search.iteration,
            'Step': search.step,
            'Step_Name': search.step_name(),
            'Current_Cost': search.working.cost_function(),
            'Move': repr(search.current_move),
        })

    def clear(self) -> None:
        self.rows.clear()

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(self.rows, columns=self.COLUMNS)

    def __len__(self) -> int:
        return len(self.rows)
