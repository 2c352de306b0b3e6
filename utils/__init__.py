"""Utility helpers for the onboarding wizard."""
