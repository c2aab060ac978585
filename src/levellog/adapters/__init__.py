"""Adapters – forwarding clients for external event collectors."""
