"""Rollbook package.

Feature modules (groups, roster, attendance, analytics) carry the server-side
repository/service/controller layers; ``client`` and ``engine`` hold the
operator-facing attendance view that edits locally and syncs in batches.
"""
