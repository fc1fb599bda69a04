from instasheets.tools.ui.interface import UserInterface

__all__ = ["UserInterface"]
