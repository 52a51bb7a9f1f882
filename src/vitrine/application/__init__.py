"""Application layer: account workflows and read views."""
