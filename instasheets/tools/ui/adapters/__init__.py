from instasheets.tools.ui.adapters.console_ui import ConsoleUI
from instasheets.tools.ui.adapters.scripted_ui import ScriptedUI

__all__ = ["ConsoleUI", "ScriptedUI"]
