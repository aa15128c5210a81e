"""Constant tables shared across scriptdeps modules."""
