"""Fitcoach — readiness, training-volume and session-impact scoring."""
