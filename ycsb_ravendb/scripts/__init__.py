"""Operational scripts for the RavenDB binding."""
