"""Pacman - Apple Collector game modules."""
