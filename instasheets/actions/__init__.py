"""
Endpoint actions: catalog, input collection, runner and factory helpers.
"""

from instasheets.actions.catalog import ACTIONS, ActionSpec, EndpointCatalog
from instasheets.actions.runner import ActionResult, ActionRunner

__all__ = ["ACTIONS", "ActionSpec", "EndpointCatalog", "ActionResult", "ActionRunner"]
