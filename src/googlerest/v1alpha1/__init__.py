"""
The v1alpha1 APIs.  Each is its own module (or package when the records
outgrow one file), import the one you need.
"""
