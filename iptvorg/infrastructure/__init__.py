"""Couche infrastructure : persistance de la bibliotheque organisee."""
