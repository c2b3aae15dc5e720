"""
Boundary layer for external system integrations.

Handles all interactions with the RavenDB server. Provides the HTTP client
the binding uses as its document-store handle.
"""
