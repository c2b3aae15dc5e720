"""
RavenDB binding for the YCSB key-value benchmarking harness.

Translates the harness's flat field-map records into RavenDB JSON documents
and maps backend outcomes onto the harness status vocabulary.
"""

__version__ = "0.1.0"
