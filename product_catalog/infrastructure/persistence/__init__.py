"""Persistence adapters: database plumbing, models and repositories."""
