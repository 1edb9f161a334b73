"""
ygodb — structured card data and limit regulation lookups.
"""
