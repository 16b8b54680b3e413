"""Hotelier: housekeeping service layer for hotel rooms and staff."""
