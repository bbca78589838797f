"""Creational patterns: builder, factories, singleton, prototype."""
