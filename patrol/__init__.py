"""
Patrol: officer positions, dispatch reports and responder units.

The package keeps the three stores in memory and mirrors each one to a JSON
document on disk. The FastAPI layer in :mod:`patrol.app` is a thin transport
over :class:`patrol.services.dispatch_service.DispatchState`.
"""
