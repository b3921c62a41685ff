"""Reusable patterns the catalog is built from.

Each module is a self-contained pattern: pure-function rules, tagged
outcomes, an explicit operation table, and a generic async repository.
"""
