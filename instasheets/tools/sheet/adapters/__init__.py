from instasheets.tools.sheet.adapters.in_memory_sheet import InMemorySheet

__all__ = ["InMemorySheet"]
