"""Provisioner components."""
