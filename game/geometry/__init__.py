"""
Toroidal field geometry: vectors, the wrap engine and asteroid outline queries.
"""
