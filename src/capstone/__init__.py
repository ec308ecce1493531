"""Capstone - research project management backend."""
