"""
Host-facing interfaces of the puzzle module
"""

from abc import ABC, abstractmethod


class ModuleHost(ABC):
    """
    Effects the module asks its host to perform.

    Calls are fire-and-forget: the module never retries them and never
    inspects a return value.
    """

    @abstractmethod
    def sever(self, slot: int) -> None:
        """Show the wire in this slot as cut"""
        pass

    @abstractmethod
    def play_cut_cue(self) -> None:
        """Snip sound / interaction feedback for any cut"""
        pass

    @abstractmethod
    def report_strike(self) -> None:
        """A wrong or premature cut happened"""
        pass

    @abstractmethod
    def report_pass(self) -> None:
        """The module has been solved"""
        pass
