"""Implementacoes concretas de IO: stores, messengers e calendario."""
