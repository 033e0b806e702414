"""Integracao com provider de calendario."""
