"""View contract and the session-scoped ViewManager.

Import from ``viewdeck.views.contract`` and ``viewdeck.views.manager``
directly; the modal host depends on the contract module.
"""
