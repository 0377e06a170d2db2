"""Utility helpers for the feedback survey."""
