"""Matchers comparing markup features against expectations."""
