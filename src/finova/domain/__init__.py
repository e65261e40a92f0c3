"""Domain layer for finova application.

Services live in ``finova.domain.transaction`` and ``finova.domain.report``
and are imported from there; this package does not re-export them so the
database layer can import ``finova.domain.entities`` without a cycle.
"""
