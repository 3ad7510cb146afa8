"""Plugins that ship with structcheck and are always registered."""
