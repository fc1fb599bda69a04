"""Adapters for the collaborators around the core pipeline: HTTP, OAuth token
storage, the destination sheet and the host user interface."""
