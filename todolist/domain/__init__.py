"""Domain value objects for the to-do list.

Nothing in this package performs I/O or touches a GUI toolkit; view-models
and views import these types to describe list entries.
"""
