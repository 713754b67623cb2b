"""Collaborator boundary, view normalization and export."""
