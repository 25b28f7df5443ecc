"""Base model that feeds registered views."""

from abc import ABC, abstractmethod
from typing import List, Optional

from termage.controller import Controller
from termage.drawable import Drawable
from termage.view import View


class Model(ABC):
    """Holds the game state, its views and its controller."""

    def __init__(self) -> None:
        self.views: List[View] = []
        self.controller: Optional[Controller] = None

    def add_view(self, view: View) -> None:
        if view not in self.views:
            self.views.append(view)

    def remove_view(self, view: View) -> None:
        if view in self.views:
            self.views.remove(view)

    def notify_views(self) -> None:
        drawables, status = self.collect_drawables(), self.collect_status()
        for view in list(self.views):
            view.notify(drawables, status)

    @abstractmethod
    def collect_drawables(self) -> List[Drawable]:
        """Everything to draw this frame."""

    @abstractmethod
    def collect_status(self) -> List[str]:
        """The status lines for this frame."""

    @abstractmethod
    def run(self) -> None:
        """Run the main loop."""