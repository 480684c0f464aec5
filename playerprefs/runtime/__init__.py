"""Prefs runtime wiring: configuration, default store, logging."""
