"""
Supplier Catalog Service Django project.
"""
