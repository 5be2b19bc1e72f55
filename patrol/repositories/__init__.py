"""
Persistence adapters.

These modules encapsulate how data is stored/retrieved (today one JSON
document per store). Services depend on the DocumentStore rather than touching
the files.
"""
